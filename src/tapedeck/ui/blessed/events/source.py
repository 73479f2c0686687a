"""Background event source: terminal input merged with periodic ticks.

Runs on its own thread. It owns nothing but the tick deadline; all it
does is read keys and send immutable events down the channel.
"""

import threading
import time
from typing import Callable, Optional

from blessed import Terminal
from blessed.keyboard import Keystroke
from loguru import logger

from tapedeck.core.errors import ChannelError
from tapedeck.domain.playback.transport import Action

from .channel import Channel, FailureEvent, InputEvent, TickEvent
from .keyboard import describe_key, parse_key

DEFAULT_TICK_INTERVAL = 0.1  # seconds


class EventSource:
    """Emit InputEvent for each key and TickEvent every `tick_interval` seconds."""

    def __init__(
        self,
        read_key: Callable[[float], Optional[Keystroke]],
        channel: Channel,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        now: Callable[[], float] = time.monotonic,
    ):
        self._read_key = read_key
        self._channel = channel
        self._tick_interval = tick_interval
        self._now = now
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def for_terminal(cls, term: Terminal, channel: Channel, tick_interval: float = DEFAULT_TICK_INTERVAL) -> "EventSource":
        """Build a source that reads keys with blessed's inkey()."""
        return cls(lambda timeout: term.inkey(timeout=timeout), channel, tick_interval)

    def start(self) -> threading.Thread:
        self._thread = threading.Thread(target=self.run, name="tapedeck-events", daemon=True)
        self._thread.start()
        return self._thread

    def run(self) -> None:
        """Thread body. Always closes the channel on exit."""
        try:
            self._loop()
        except ChannelError:
            logger.debug("Event channel closed by main loop, stopping event source")
        except Exception as e:
            logger.exception(f"Event source failed: {e}")
            if not self._channel.closed:
                self._channel.send(FailureEvent(e))
        finally:
            self._channel.close()

    def _loop(self) -> None:
        next_tick = self._now() + self._tick_interval
        while True:
            timeout = max(0.0, next_tick - self._now())
            key = self._read_key(timeout)

            if key:
                action = parse_key(key)
                self._channel.send(InputEvent(action=action, key=describe_key(key)))
                if action is Action.QUIT:
                    return

            now = self._now()
            if now >= next_tick:
                self._channel.send(TickEvent(at=now))
                next_tick = now + self._tick_interval
