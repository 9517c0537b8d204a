"""Rendering-free game logic for a two-player constellation-connecting puzzle."""

__version__ = "0.1.0"