"""Input and tick events for the blessed UI."""

from .channel import Channel, Event, FailureEvent, InputEvent, TickEvent
from .keyboard import describe_key, parse_key
from .source import DEFAULT_TICK_INTERVAL, EventSource

__all__ = [
    "Channel",
    "Event",
    "FailureEvent",
    "InputEvent",
    "TickEvent",
    "describe_key",
    "parse_key",
    "DEFAULT_TICK_INTERVAL",
    "EventSource",
]
