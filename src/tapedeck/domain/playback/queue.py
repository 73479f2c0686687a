"""
Play queue: ordered (track, source path) pairs with a cursor.

Only the main loop touches the queue; navigation never wraps around.
"""

from typing import Sequence

from tapedeck.domain.library.loader import display_name
from tapedeck.domain.library.models import Track


class Queue:
    """Ordered, non-empty playlist plus a cursor into it."""

    def __init__(self, entries: Sequence[tuple[Track, str]]):
        if not entries:
            raise ValueError("Queue requires at least one track")
        self._entries = list(entries)
        self._names = [display_name(path) for _, path in self._entries]
        self.cursor = 0

    def __len__(self) -> int:
        return len(self._entries)

    def current(self) -> tuple[Track, int]:
        """Track at the cursor and its index."""
        return self._entries[self.cursor][0], self.cursor

    def current_path(self) -> str:
        return self._entries[self.cursor][1]

    def next(self) -> bool:
        """Advance one entry; False (and no move) when already at the last."""
        if self.cursor >= len(self._entries) - 1:
            return False
        self.cursor += 1
        return True

    def prev(self) -> bool:
        """Retreat one entry; False (and no move) when already at the first."""
        if self.cursor == 0:
            return False
        self.cursor -= 1
        return True

    def rewind(self) -> None:
        """Move the cursor back to the first entry."""
        self.cursor = 0

    def listing(self) -> list[str]:
        """Display names in queue order, derived from source filenames."""
        return list(self._names)
