"""Tapedeck - terminal audio player with a live transport UI."""

__version__ = "0.1.0"
