"""Tests for the playback stopwatch."""

import time

import pytest

from tapedeck.domain.playback.clock import PlaybackClock


class TestPlaybackClock:
    """Stopwatch semantics with a manual time source."""

    def test_new_clock_is_stopped_at_zero(self, clock):
        assert clock.elapsed() == 0.0
        assert not clock.running

    def test_elapsed_after_reset_is_zero(self, clock, fake_time):
        clock.start()
        fake_time.advance(7.5)
        clock.reset()
        assert clock.elapsed() == 0.0

    def test_reset_keeps_running_clock_running(self, clock, fake_time):
        clock.start()
        fake_time.advance(3.0)
        clock.reset()
        fake_time.advance(1.5)
        assert clock.running
        assert clock.elapsed() == pytest.approx(1.5)

    def test_reset_while_stopped_stays_stopped(self, clock, fake_time):
        clock.start()
        fake_time.advance(2.0)
        clock.stop()
        clock.reset()
        fake_time.advance(5.0)
        assert clock.elapsed() == 0.0

    def test_start_wait_stop(self, clock, fake_time):
        clock.start()
        fake_time.advance(4.25)
        clock.stop()
        assert clock.elapsed() == pytest.approx(4.25)

    def test_start_is_idempotent(self, clock, fake_time):
        clock.start()
        fake_time.advance(2.0)
        clock.start()  # must not rebase the running segment
        fake_time.advance(1.0)
        assert clock.elapsed() == pytest.approx(3.0)

    def test_stop_is_idempotent(self, clock, fake_time):
        clock.start()
        fake_time.advance(2.0)
        clock.stop()
        fake_time.advance(10.0)
        clock.stop()
        assert clock.elapsed() == pytest.approx(2.0)

    def test_stopped_value_is_stable(self, clock, fake_time):
        clock.start()
        fake_time.advance(1.0)
        clock.stop()
        first = clock.elapsed()
        fake_time.advance(60.0)
        assert clock.elapsed() == first

    def test_segments_accumulate(self, clock, fake_time):
        for _ in range(3):
            clock.start()
            fake_time.advance(1.0)
            clock.stop()
            fake_time.advance(5.0)
        assert clock.elapsed() == pytest.approx(3.0)

    def test_elapsed_does_not_mutate(self, clock, fake_time):
        clock.start()
        fake_time.advance(1.0)
        clock.elapsed()
        clock.elapsed()
        fake_time.advance(1.0)
        assert clock.elapsed() == pytest.approx(2.0)

    def test_real_time_source(self):
        """Default monotonic source tracks wall time within timer resolution."""
        clock = PlaybackClock()
        clock.start()
        time.sleep(0.05)
        clock.stop()
        assert 0.04 <= clock.elapsed() < 0.5
