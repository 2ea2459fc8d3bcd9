"""Tests for the pause-aware run clock."""

from orb_snake.clock import RunClock, orb_expired, orb_remaining_seconds


class TestRunClock:
    def test_elapsed_floors_to_seconds(self):
        clock = RunClock()
        clock.start(1000)
        assert clock.elapsed_seconds(1999) == 0
        assert clock.elapsed_seconds(2000) == 1
        assert clock.elapsed_seconds(4500) == 3

    def test_resume_shifts_start_by_pause_length(self):
        clock = RunClock()
        clock.start(0)
        clock.pause(2500)
        assert clock.resume(7500) == 5000
        assert clock.game_start_time == 5000
        assert clock.elapsed_seconds(7500) == 2

    def test_elapsed_is_frozen_while_paused(self):
        clock = RunClock()
        clock.start(0)
        clock.pause(3200)
        assert clock.elapsed_seconds(60_000) == 3

    def test_restart_clears_pause(self):
        clock = RunClock()
        clock.start(0)
        clock.pause(100)
        clock.start(500)
        assert not clock.paused
        assert clock.elapsed_ms(1500) == 1000


class TestOrbTimer:
    def test_remaining_has_one_decimal(self):
        assert orb_remaining_seconds(0, 1234) == 3.8
        assert orb_remaining_seconds(0, 0) == 5.0

    def test_remaining_halves_round_up(self):
        assert orb_remaining_seconds(0, 4750) == 0.3
        assert orb_remaining_seconds(0, 3750) == 1.3
        assert orb_remaining_seconds(0, 4751) == 0.2

    def test_remaining_never_negative(self):
        assert orb_remaining_seconds(0, 9000) == 0.0

    def test_expiry_is_inclusive(self):
        assert not orb_expired(0, 4999)
        assert orb_expired(0, 5000)
