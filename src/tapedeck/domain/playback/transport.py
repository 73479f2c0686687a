"""
Transport state machine.

The controller owns the queue, the playback clock, the volume and the
current audio sink, and is the only place any of them change. It runs
entirely on the main thread.

States:
    stopped-at-start  initial; paused with elapsed = 0
    playing
    paused
Quitting is not a state: the caller's loop simply stops.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from loguru import logger

from tapedeck.core.errors import TrackError

from .clock import PlaybackClock
from .queue import Queue

if TYPE_CHECKING:
    from .sink import Sink


class Action(Enum):
    """Transport commands produced by key presses."""

    TOGGLE = "toggle"
    NEXT = "next"
    PREVIOUS = "previous"
    VOLUME_UP = "volume_up"
    VOLUME_DOWN = "volume_down"
    QUIT = "quit"


@dataclass(frozen=True)
class PlaybackState:
    """Snapshot of transport state for rendering."""
    playing: bool
    elapsed: float  # seconds
    total: float  # seconds


class TransportController:
    """Applies transport actions and ticks to queue, clock and sink."""

    def __init__(
        self,
        queue: Queue,
        sink_factory: Callable[[], "Sink"],
        clock: Optional[PlaybackClock] = None,
        volume: int = 100,
        volume_step: int = 5,
        restart_threshold: float = 2.0,
    ):
        self.queue = queue
        self.clock = clock or PlaybackClock()
        self.volume = max(0, min(100, volume))
        self.volume_step = volume_step
        self.restart_threshold = restart_threshold
        self.playing = False
        self.total = 0.0
        self._sink_factory = sink_factory
        self._sink: Optional["Sink"] = None

    def start(self) -> None:
        """Load the first track paused with elapsed = 0."""
        self._reload(playing=False)

    def close(self) -> None:
        """Stop the clock and release the sink."""
        self.clock.stop()
        if self._sink is not None:
            self._sink.stop()
            self._sink = None

    def playback_state(self) -> PlaybackState:
        return PlaybackState(playing=self.playing, elapsed=self.clock.elapsed(), total=self.total)

    def _reload(self, playing: bool) -> None:
        """Reset the clock and recreate the sink for the track at the cursor.

        Sink failures propagate; a broken sink ends the session.
        """
        track, idx = self.queue.current()
        stream = track.source()
        total = stream.total_duration
        if total is None:
            raise TrackError(f"Track {idx + 1} ({self.queue.current_path()}) has no known duration")

        self.clock.reset()
        self.total = total

        if self._sink is not None:
            self._sink.stop()
        self._sink = self._sink_factory()
        self._sink.set_volume(self.volume / 100)
        self._sink.append(stream)
        self._sink.pause()

        self.playing = playing
        if playing:
            self._sink.play()
            self.clock.start()
        else:
            self.clock.stop()

        logger.debug(f"Loaded track {idx + 1}/{len(self.queue)} ({total:.1f}s, playing={playing})")

    def toggle(self) -> None:
        self.playing = not self.playing
        if self.playing:
            self.clock.start()
            self._sink.play()
        else:
            self.clock.stop()
            self._sink.pause()
        logger.debug(f"Toggled: playing={self.playing}")

    def skip_forward(self) -> None:
        if not self.queue.next():
            return
        self._reload(self.playing)

    def skip_backward(self) -> None:
        """Previous track near the start of a track, otherwise restart it."""
        if self.clock.elapsed() < self.restart_threshold:
            self.queue.prev()
            logger.debug(f"Skip back to track {self.queue.cursor + 1}")
        else:
            logger.debug(f"Restart track {self.queue.cursor + 1}")
        self._reload(self.playing)

    def change_volume(self, delta: int) -> None:
        volume = max(0, min(100, self.volume + delta))
        if volume == self.volume:
            return
        self.volume = volume
        self._sink.set_volume(volume / 100)
        logger.debug(f"Volume: {volume}%")

    def tick(self) -> PlaybackState:
        """Advance past finished tracks; rewind and pause after the last one."""
        state = self.playback_state()
        if not (state.playing and state.elapsed >= state.total):
            return state

        if self.queue.next():
            logger.debug(f"Auto-advance to track {self.queue.cursor + 1}")
            self._reload(playing=True)
        else:
            logger.info("End of queue, rewinding to first track")
            self.queue.rewind()
            self.playing = False
            self._sink.stop()
            self._sink = None
            self.clock.stop()
            self._reload(playing=False)
        return self.playback_state()

    def handle(self, action: Optional[Action]) -> bool:
        """
        Apply one transport action.

        Args:
            action: Parsed key action, None for unrecognized keys

        Returns:
            False when the session should end, True otherwise
        """
        if action is Action.QUIT:
            return False
        if action is Action.TOGGLE:
            self.toggle()
        elif action is Action.NEXT:
            self.skip_forward()
        elif action is Action.PREVIOUS:
            self.skip_backward()
        elif action is Action.VOLUME_UP:
            self.change_volume(self.volume_step)
        elif action is Action.VOLUME_DOWN:
            self.change_volume(-self.volume_step)
        return True
