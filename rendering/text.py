"""Text rendering for HUD elements."""

import pygame

from config import boids as config


class TextRenderer:
    """Renders text overlays using pygame fonts."""
    
    def __init__(self, font_name: str = "monospace", font_size: int = 16):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
    
    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int):
        """
        Draw text at the given screen position.
        
        Args:
            surface: The surface to draw on
            text: The string to render
            x: X position from left edge
            y: Y position from top edge
        """
        text_surface = self.font.render(text, True, config.COLORS["text"])
        surface.blit(text_surface, (x, y))
