"""Helpers for terminal output and list scrolling."""

from .scrolling import compute_scroll_window
from .terminal import draw_lines, write_at

__all__ = ["compute_scroll_window", "draw_lines", "write_at"]
