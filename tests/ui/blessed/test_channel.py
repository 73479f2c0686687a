"""Tests for the event channel between the event source and main loop."""

import threading

import pytest

from tapedeck.core.errors import ChannelError
from tapedeck.domain.playback.transport import Action
from tapedeck.ui.blessed.events.channel import Channel, FailureEvent, InputEvent, TickEvent


class TestChannel:
    def test_delivers_in_send_order(self):
        channel = Channel()
        events = [TickEvent(at=1.0), InputEvent(Action.TOGGLE, "' '"), TickEvent(at=2.0)]
        for event in events:
            channel.send(event)
        assert [channel.recv() for _ in events] == events

    def test_pending_events_survive_close(self):
        channel = Channel()
        channel.send(TickEvent(at=1.0))
        channel.close()
        assert channel.recv() == TickEvent(at=1.0)
        with pytest.raises(ChannelError):
            channel.recv()

    def test_recv_after_close_keeps_failing(self):
        channel = Channel()
        channel.close()
        for _ in range(3):
            with pytest.raises(ChannelError):
                channel.recv()

    def test_send_after_close_fails(self):
        channel = Channel()
        channel.close()
        assert channel.closed
        with pytest.raises(ChannelError):
            channel.send(TickEvent(at=0.0))

    def test_close_is_idempotent(self):
        channel = Channel()
        channel.close()
        channel.close()
        with pytest.raises(ChannelError):
            channel.recv()

    def test_recv_blocks_until_send(self):
        channel = Channel()
        received = []

        def consume():
            received.append(channel.recv())

        consumer = threading.Thread(target=consume)
        consumer.start()
        channel.send(InputEvent(None, "'x'"))
        consumer.join(timeout=2)
        assert received == [InputEvent(None, "'x'")]

    def test_events_are_immutable(self):
        event = FailureEvent(RuntimeError("boom"))
        with pytest.raises(AttributeError):
            event.error = None
