"""Shared fixtures: synthetic tracks, a fake sink and a controllable clock."""

from typing import Optional

import numpy as np
import pytest

from tapedeck.domain.library.models import SampleStream, Track
from tapedeck.domain.playback.clock import PlaybackClock
from tapedeck.domain.playback.queue import Queue
from tapedeck.domain.playback.transport import TransportController


class FakeTime:
    """Manually advanced monotonic time source."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSink:
    """Records every command issued to it."""

    def __init__(self):
        self.calls: list[str] = []
        self.stream: Optional[SampleStream] = None
        self.playing = False
        self.volume: Optional[float] = None
        self.stopped = False

    def append(self, stream: SampleStream) -> None:
        self.calls.append("append")
        self.stream = stream

    def play(self) -> None:
        self.calls.append("play")
        self.playing = True

    def pause(self) -> None:
        self.calls.append("pause")
        self.playing = False

    def stop(self) -> None:
        self.calls.append("stop")
        self.playing = False
        self.stopped = True

    def set_volume(self, volume: float) -> None:
        self.calls.append("set_volume")
        self.volume = volume


def make_track(seconds: float = 10.0, sample_rate: int = 1000, channels: int = 2, **tags) -> Track:
    """Silent track of the given length; low sample rate keeps arrays small."""
    frames = int(seconds * sample_rate)
    return Track(
        samples=np.zeros((frames, channels), dtype=np.float32),
        sample_rate=sample_rate,
        bit_depth=16,
        **tags,
    )


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def clock(fake_time: FakeTime) -> PlaybackClock:
    return PlaybackClock(now=fake_time)


@pytest.fixture
def sinks() -> list[FakeSink]:
    """Every sink the transport created, in order."""
    return []


@pytest.fixture
def make_transport(clock: PlaybackClock, sinks: list[FakeSink]):
    """Factory: started transport over tracks of the given durations."""

    def _make(durations: list[float], **kwargs) -> TransportController:
        entries = [
            (make_track(seconds, title=f"Track {i + 1}"), f"/music/{i + 1:02d} - song.flac")
            for i, seconds in enumerate(durations)
        ]

        def factory() -> FakeSink:
            sink = FakeSink()
            sinks.append(sink)
            return sink

        transport = TransportController(Queue(entries), factory, clock=clock, **kwargs)
        transport.start()
        return transport

    return _make


@pytest.fixture
def track_factory():
    """The make_track helper, for tests that build their own queues."""
    return make_track