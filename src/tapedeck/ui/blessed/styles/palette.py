"""Color roles for the transport UI."""

from blessed import Terminal

# Role -> blessed formatter name
STYLES: dict[str, str] = {
    "title": "bold_white",
    "artist": "bold_blue",
    "album": "blue",
    "format": "white",
    "position": "cyan",
    "play": "bold_green",
    "pause": "bold_yellow",
    "progress": "green",
    "timestamp": "white",
    "volume": "magenta",
    "queue_header": "bold_cyan",
    "queue_current": "black_on_cyan",
    "queue_item": "white",
}


def paint(term: Terminal, role: str, text: str, use_colors: bool = True) -> str:
    """Apply the role's formatter, or return text unchanged when colors are off."""
    if not use_colors or not text:
        return text
    return getattr(term, STYLES[role])(text)
