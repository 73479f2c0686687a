"""Terminal output utilities that prevent rendering artifacts."""

import sys

from blessed import Terminal


def write_at(term: Terminal, x: int, y: int, content: str) -> None:
    """Write content at position, clearing the rest of the line.

    Clearing prevents leftovers when new content is shorter than what
    was previously drawn at the same row.
    """
    sys.stdout.write(term.move_xy(x, y) + term.clear_eol + content)


def draw_lines(term: Terminal, lines: list[str]) -> None:
    """Draw a full frame, one entry per terminal row, then flush."""
    for y, line in enumerate(lines):
        write_at(term, 0, y, line)
    sys.stdout.flush()
