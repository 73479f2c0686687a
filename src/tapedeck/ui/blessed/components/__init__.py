"""Rendering functions for blessed UI."""

from .dashboard import render_metadata, render_playback_row
from .frame import render_frame
from .layout import calculate_layout
from .queue_panel import render_queue_panel

__all__ = [
    "render_metadata",
    "render_playback_row",
    "render_frame",
    "calculate_layout",
    "render_queue_panel",
]
