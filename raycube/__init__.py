"""Raycasting engine and pygame viewer for .cub scene files."""

__version__ = "1.0.0"