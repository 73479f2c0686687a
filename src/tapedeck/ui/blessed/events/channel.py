"""Single-producer/single-consumer event channel.

Events are immutable values passed from the event source thread to the
main loop in order; nothing is reordered or coalesced.
"""

import queue
import threading
from dataclasses import dataclass
from typing import Optional, Union

from tapedeck.core.errors import ChannelError
from tapedeck.domain.playback.transport import Action


@dataclass(frozen=True)
class InputEvent:
    """A key press. `action` is None for keys with no binding."""
    action: Optional[Action]
    key: str


@dataclass(frozen=True)
class TickEvent:
    """Periodic refresh, independent of input."""
    at: float


@dataclass(frozen=True)
class FailureEvent:
    """The producer thread died; the main loop treats this as fatal."""
    error: BaseException


Event = Union[InputEvent, TickEvent, FailureEvent]

_CLOSED = object()


class Channel:
    """Ordered event channel that either side may close."""

    def __init__(self):
        self._queue: queue.Queue = queue.Queue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, event: Event) -> None:
        """
        Enqueue an event.

        Raises:
            ChannelError: If the channel has been closed
        """
        if self._closed.is_set():
            raise ChannelError("event channel closed by receiver")
        self._queue.put(event)

    def recv(self) -> Event:
        """
        Block until the next event.

        Events sent before close() are still delivered.

        Raises:
            ChannelError: If the channel is closed and drained
        """
        event = self._queue.get()
        if event is _CLOSED:
            # Keep the marker for any later recv() call
            self._queue.put(_CLOSED)
            raise ChannelError("event channel closed by sender")
        return event

    def close(self) -> None:
        if not self._closed.is_set():
            self._closed.set()
            self._queue.put(_CLOSED)
