"""Playback domain - queue, clock and transport control.

This domain handles:
- Queue navigation with boundary (non-wrapping) semantics
- Wall-clock elapsed time independent of the audio backend
- The play/pause/skip/auto-advance state machine

The sounddevice-backed AudioSink lives in .sink and is imported only
where an output device is opened, so the rest of the domain loads
without PortAudio.
"""

from .clock import PlaybackClock
from .queue import Queue
from .transport import Action, PlaybackState, TransportController

__all__ = [
    "PlaybackClock",
    "Queue",
    "Action",
    "PlaybackState",
    "TransportController",
]
