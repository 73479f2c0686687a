"""Queue listing panel."""

from blessed import Terminal

from ..helpers.scrolling import compute_scroll_window
from ..state import DisplayState
from ..styles import paint, truncate

CURRENT_MARKER = "▶ "
OTHER_MARKER = "  "


def render_queue_panel(term: Terminal, display: DisplayState, layout: dict[str, int],
                       use_colors: bool = True) -> list[str]:
    """
    Render the queue header and a scrolled window of entries.

    The current entry is marked and highlighted; the window keeps it in view.

    Returns:
        At most layout['queue_height'] rows
    """
    height = layout["queue_height"]
    if height <= 0:
        return []

    left = " " * layout["left"]
    width = layout["queue_width"]
    rows = [left + paint(term, "queue_header", truncate("Queue", width), use_colors)]

    start, end = compute_scroll_window(display.position, len(display.listing), height - 1)
    for idx in range(start, end):
        current = idx == display.position
        marker = CURRENT_MARKER if current else OTHER_MARKER
        text = truncate(f"{marker}{idx + 1:02d}. {display.listing[idx]}", width)
        role = "queue_current" if current else "queue_item"
        rows.append(left + paint(term, role, text, use_colors))

    return rows
