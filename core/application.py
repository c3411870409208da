"""Main application class that ties everything together."""

from typing import Optional

import numpy as np
import pygame

from config import boids as config
from .input_handler import InputHandler
from rendering import TextRenderer
from boids import Flock, FrameDimensions


class Application:
    """Main application managing the frame loop and rendering."""
    
    def __init__(self, flock: Flock, frame: FrameDimensions, seed: Optional[int] = None):
        pygame.init()
        self.screen = pygame.display.set_mode(
            (int(frame.frame_width), int(frame.frame_height))
        )
        pygame.display.set_caption(config.WINDOW["title"])
        
        self.input_handler = InputHandler()
        self.text_renderer = TextRenderer()
        
        # Simulation
        self.frame = frame
        self.flock = flock
        self.rng = np.random.default_rng(seed)
        self.flock.warmup()
        self.flock.randomly_generate_boids(self.frame, self.rng)
        
        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0
        self.ticks = 0
    
    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False
        
        if self.input_handler.consume_restart():
            print("[Boids] Re-randomising flock")
            self.flock.randomly_generate_boids(self.frame, self.rng)
            self.ticks = 0
    
    def _draw_boid(self, index: int, x: float, y: float):
        palette = config.COLORS["palette"]
        pygame.draw.circle(
            self.screen,
            palette[index % len(palette)],
            (int(x), int(y)),
            int(config.BOIDS["radius"])
        )
    
    def _render(self):
        """Update each boid and draw it, then finish the tick."""
        self.screen.fill(config.COLORS["background"])
        
        paused = self.input_handler.paused
        for i in range(len(self.flock)):
            boid = self.flock.boid(i) if paused else self.flock.update_boid(i, self.frame)
            self._draw_boid(i, boid.x, boid.y)
        
        if not paused:
            self.flock.commit()
            self.ticks += 1
        
        # Draw HUD
        status = "  |  PAUSED" if paused else ""
        self.text_renderer.draw_text(
            self.screen,
            f"Boids: {len(self.flock)}  |  Tick: {self.ticks}  |  FPS: {self.fps:.0f}{status}",
            10, 10
        )
        
        pygame.display.flip()
    
    def run(self):
        """Main application loop."""
        print(f"[Boids] Simulating {len(self.flock)} boids in "
              f"{self.frame.frame_width:.0f}x{self.frame.frame_height:.0f}")
        while self.running:
            self.clock.tick(config.WINDOW["fps"])
            self.fps = self.clock.get_fps()
            
            self._handle_events()
            self._render()
        
        print(f"[Boids] Stopped after {self.ticks} ticks")
        pygame.quit()
