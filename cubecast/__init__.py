"""Raycasting maze game that plays .cub map files."""

__version__ = "0.1.0"