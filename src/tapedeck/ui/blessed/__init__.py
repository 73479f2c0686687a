"""Blessed terminal UI: event source, derived display state, rendering, main loop."""

from .app import main_loop, run_interactive_ui

__all__ = ["main_loop", "run_interactive_ui"]
