"""Rendering components for the boids simulation."""

from .text import TextRenderer

__all__ = ["TextRenderer"]
