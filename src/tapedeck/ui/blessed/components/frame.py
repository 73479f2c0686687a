"""Full-frame composition: a pure mapping from display state to screen rows."""

from blessed import Terminal

from ..state import DisplayState
from ..styles import truncate
from .dashboard import render_metadata, render_playback_row
from .layout import MIN_HEIGHT, MIN_WIDTH, calculate_layout, fits
from .queue_panel import render_queue_panel


def render_frame(
    term: Terminal,
    display: DisplayState,
    width: int,
    height: int,
    use_colors: bool = True,
    show_queue: bool = True,
) -> list[str]:
    """
    Render one frame.

    Args:
        term: blessed Terminal instance (formatting only, nothing is written)
        display: Derived display state
        width: Terminal width
        height: Terminal height
        use_colors: Apply color roles
        show_queue: Include the queue listing panel

    Returns:
        Exactly `height` rows
    """
    rows = [""] * max(0, height)
    if not fits(width, height):
        if rows:
            rows[0] = truncate(f"Terminal too small (need {MIN_WIDTH}x{MIN_HEIGHT})", width)
        return rows

    layout = calculate_layout(width, height)

    for offset, line in enumerate(render_metadata(term, display, layout, use_colors)):
        rows[layout["metadata_y"] + offset] = line

    if show_queue:
        for offset, line in enumerate(render_queue_panel(term, display, layout, use_colors)):
            rows[layout["queue_y"] + offset] = line

    rows[layout["playback_y"]] = render_playback_row(term, display, layout, use_colors)
    return rows
