"""Pygame rendering backend."""

from .pygame_renderer import PygameRenderer

__all__ = ["PygameRenderer"]
