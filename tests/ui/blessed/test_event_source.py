"""Tests for the background event source."""

import pytest
from blessed.keyboard import Keystroke

from tapedeck.core.errors import ChannelError
from tapedeck.domain.playback.transport import Action
from tapedeck.ui.blessed.events.channel import Channel, FailureEvent, InputEvent, TickEvent
from tapedeck.ui.blessed.events.source import EventSource


class ScriptedKeys:
    """read_key stand-in: each entry is (seconds until pressed, key text).

    Waiting consumes fake time exactly like inkey(timeout) would.
    """

    def __init__(self, fake_time, script):
        self.fake_time = fake_time
        self.script = list(script)
        self.timeouts = []

    def __call__(self, timeout):
        self.timeouts.append(timeout)
        if not self.script:
            raise AssertionError("read past end of script")
        delay, text = self.script[0]
        if delay <= timeout:
            self.fake_time.advance(delay)
            self.script.pop(0)
            return Keystroke(text)
        self.fake_time.advance(timeout)
        self.script[0] = (delay - timeout, text)
        return Keystroke("")


def drain(channel):
    events = []
    while True:
        try:
            events.append(channel.recv())
        except ChannelError:
            return events


class TestEventSource:
    """Ordering of key and tick events and shutdown behaviour."""

    def test_interleaves_keys_and_ticks(self, fake_time):
        channel = Channel()
        keys = ScriptedKeys(fake_time, [(0.625, " "), (0.25, "\x1b")])
        EventSource(keys, channel, tick_interval=0.25, now=fake_time).run()

        events = drain(channel)
        start = 1000.0
        assert events == [
            TickEvent(at=start + 0.25),
            TickEvent(at=start + 0.5),
            InputEvent(Action.TOGGLE, "' '"),
            TickEvent(at=start + 0.75),
            InputEvent(Action.QUIT, "'\\x1b'"),
        ]

    def test_keys_do_not_push_back_ticks(self, fake_time):
        """A key press waits only for the remainder of the current interval."""
        channel = Channel()
        keys = ScriptedKeys(fake_time, [(0.125, "a"), (0.25, "\x1b")])
        EventSource(keys, channel, tick_interval=0.25, now=fake_time).run()

        assert keys.timeouts[:2] == [0.25, 0.125]
        assert TickEvent(at=1000.25) in drain(channel)

    def test_unbound_key_still_sent(self, fake_time):
        channel = Channel()
        keys = ScriptedKeys(fake_time, [(0.0, "z"), (0.0, "\x1b")])
        EventSource(keys, channel, tick_interval=1.0, now=fake_time).run()

        events = drain(channel)
        assert events[0] == InputEvent(None, "'z'")
        assert events[-1].action is Action.QUIT

    def test_escape_closes_channel(self, fake_time):
        channel = Channel()
        keys = ScriptedKeys(fake_time, [(0.0, "\x1b")])
        EventSource(keys, channel, now=fake_time).run()
        assert channel.closed

    def test_read_failure_sends_failure_event(self, fake_time):
        channel = Channel()

        def broken(timeout):
            raise OSError("terminal went away")

        EventSource(broken, channel, now=fake_time).run()

        events = drain(channel)
        assert len(events) == 1
        assert isinstance(events[0], FailureEvent)
        assert isinstance(events[0].error, OSError)

    def test_stops_when_receiver_closes(self, fake_time):
        channel = Channel()
        channel.close()
        keys = ScriptedKeys(fake_time, [(0.0, " ")])
        EventSource(keys, channel, now=fake_time).run()
        assert keys.script == []
        with pytest.raises(ChannelError):
            channel.recv()

    def test_runs_on_daemon_thread(self):
        channel = Channel()
        source = EventSource(lambda timeout: Keystroke("\x1b"), channel)
        thread = source.start()
        thread.join(timeout=2)

        assert thread.daemon
        assert not thread.is_alive()
        assert channel.recv().action is Action.QUIT
