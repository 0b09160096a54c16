"""Octagon-tiled jigsaw puzzle core: tessellation geometry and game state machine."""

__version__ = "0.1.0"
