"""Input handling for keyboard events."""

import pygame
from pygame.locals import *


class InputHandler:
    """Handles keyboard input for pausing and restarting the simulation."""
    
    def __init__(self):
        self.paused = False
        self.restart_requested = False
    
    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            elif event.key == K_SPACE:
                self.paused = not self.paused
            elif event.key == K_r:
                self.restart_requested = True
        
        return True
    
    def consume_restart(self) -> bool:
        """Return True once per R press."""
        requested = self.restart_requested
        self.restart_requested = False
        return requested
