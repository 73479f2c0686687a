"""Dashboard rendering: metadata panel, volume gauge and playback row."""

from blessed import Terminal

from ..state import DisplayState
from ..styles import format_time, format_volume, paint, render_gauge, truncate
from .layout import LABEL_WIDTH, PAUSE_LABEL, PLAY_LABEL


def render_metadata(term: Terminal, display: DisplayState, layout: dict[str, int],
                    use_colors: bool = True) -> list[str]:
    """
    Render the metadata panel rows, with the volume gauge on the first row.

    Args:
        term: blessed Terminal instance
        display: Derived display state
        layout: Region positions from calculate_layout()
        use_colors: Apply color roles

    Returns:
        Rows for the top of the screen, starting at layout['metadata_y']
    """
    left = " " * layout["left"]
    width = layout["metadata_width"]

    title = truncate(display.title, width)
    volume_gap = max(1, layout["volume_x"] - layout["left"] - len(title))
    volume = paint(term, "volume", format_volume(display.volume), use_colors)
    first = left + paint(term, "title", title, use_colors) + " " * volume_gap + volume

    position = f"{display.position + 1:02d} / {display.count:02d}"
    return [
        first,
        left + paint(term, "artist", truncate(display.artist, width), use_colors),
        left + paint(term, "album", truncate(display.album, width), use_colors),
        left + paint(term, "format", truncate(display.format_line, width), use_colors),
        left + paint(term, "position", position, use_colors),
    ]


def render_playback_row(term: Terminal, display: DisplayState, layout: dict[str, int],
                        use_colors: bool = True) -> str:
    """Play/pause label, progress gauge and elapsed MM:SS."""
    if display.playing:
        label = paint(term, "play", PLAY_LABEL.ljust(LABEL_WIDTH), use_colors)
    else:
        label = paint(term, "pause", PAUSE_LABEL.ljust(LABEL_WIDTH), use_colors)

    gauge = render_gauge(display.progress, layout["progress_width"])
    elapsed = min(display.elapsed, display.total) if display.total > 0 else display.elapsed

    return (
        " " * layout["left"]
        + label
        + " "
        + paint(term, "progress", gauge, use_colors)
        + "  "
        + paint(term, "timestamp", format_time(elapsed), use_colors)
    )
