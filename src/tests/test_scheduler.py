"""
Tests for TimerScheduler and OnceInMs.
"""

import pytest

from utils import OnceInMs, TimerScheduler

from game_helpers import FakeClock


@pytest.fixture
def fake_clock():
    return FakeClock()


class TestTimerScheduler:

    def test_callback_runs_only_when_due(self, fake_clock):
        scheduler = TimerScheduler(clock=fake_clock)
        fired = []
        scheduler.call_later(100, lambda: fired.append("a"))

        fake_clock.advance_ms(99)
        assert scheduler.run_due() == 0
        fake_clock.advance_ms(1)
        assert scheduler.run_due() == 1
        assert fired == ["a"]

    def test_due_callbacks_run_in_deadline_order(self, fake_clock):
        scheduler = TimerScheduler(clock=fake_clock)
        fired = []
        scheduler.call_later(300, lambda: fired.append(300))
        scheduler.call_later(100, lambda: fired.append(100))
        scheduler.call_later(200, lambda: fired.append(200))
        scheduler.call_later(100, lambda: fired.append("100-second"))

        fake_clock.advance_ms(500)
        scheduler.run_due()

        assert fired == [100, "100-second", 200, 300]

    def test_callbacks_scheduled_while_running_wait_for_next_drain(self, fake_clock):
        scheduler = TimerScheduler(clock=fake_clock)
        fired = []
        scheduler.call_later(0, lambda: scheduler.call_later(0, lambda: fired.append("inner")))

        assert scheduler.run_due() == 1
        assert fired == []
        assert scheduler.run_due() == 1
        assert fired == ["inner"]

    def test_cancel(self, fake_clock):
        scheduler = TimerScheduler(clock=fake_clock)
        fired = []
        timer_id = scheduler.call_later(10, lambda: fired.append("x"))
        assert scheduler.cancel(timer_id)

        assert scheduler.pending_count() == 0
        fake_clock.advance_ms(10)
        assert scheduler.run_due() == 0
        assert fired == []

    def test_cancel_after_fire_or_clear_is_noop(self, fake_clock):
        scheduler = TimerScheduler(clock=fake_clock)
        fired_id = scheduler.call_later(5, lambda: None)
        cleared_id = scheduler.call_later(50, lambda: None)
        fake_clock.advance_ms(5)
        scheduler.run_due()
        scheduler.clear()

        assert not scheduler.cancel(fired_id)
        assert not scheduler.cancel(cleared_id)
        assert scheduler._cancelled == set()

    def test_cancel_twice(self, fake_clock):
        scheduler = TimerScheduler(clock=fake_clock)
        timer_id = scheduler.call_later(10, lambda: None)

        assert scheduler.cancel(timer_id)
        assert not scheduler.cancel(timer_id)
        fake_clock.advance_ms(10)
        assert scheduler.run_due() == 0
        assert scheduler._cancelled == set()

    def test_negative_delay_rejected(self, fake_clock):
        scheduler = TimerScheduler(clock=fake_clock)
        with pytest.raises(ValueError):
            scheduler.call_later(-1, lambda: None)

    def test_clear(self, fake_clock):
        scheduler = TimerScheduler(clock=fake_clock)
        scheduler.call_later(10, lambda: None)
        scheduler.call_later(20, lambda: None)
        scheduler.clear()
        assert scheduler.pending_count() == 0


class TestOnceInMs:

    def test_first_call_executes(self, fake_clock):
        timer = OnceInMs(1000, clock=fake_clock)
        assert timer.should_execute()
        assert not timer.should_execute()

    def test_executes_again_after_interval(self, fake_clock):
        timer = OnceInMs(1000, clock=fake_clock)
        timer.should_execute()

        fake_clock.advance_ms(999)
        assert not timer.should_execute()
        fake_clock.advance_ms(1)
        assert timer.should_execute()

    def test_reset(self, fake_clock):
        timer = OnceInMs(1000, clock=fake_clock)
        timer.should_execute()
        timer.reset()
        assert timer.should_execute()
