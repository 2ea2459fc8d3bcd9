"""Pause-aware run clock.

Elapsed time is always ``now - game_start_time``. Instead of accumulating
paused time, resuming shifts the recorded start times forward by the pause
duration, so every derived duration skips the pause for free.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import ORB_LIFESPAN


@dataclass(slots=True)
class RunClock:
    game_start_time: int = 0
    last_pause_time: int = 0
    paused: bool = False

    def start(self, now: int) -> None:
        self.game_start_time = now
        self.last_pause_time = 0
        self.paused = False

    def pause(self, now: int) -> None:
        self.last_pause_time = now
        self.paused = True

    def resume(self, now: int) -> int:
        """Close the pause interval and return its length in ms."""
        paused_for = max(0, now - self.last_pause_time)
        self.game_start_time += paused_for
        self.paused = False
        return paused_for

    def frozen(self, now: int) -> int:
        """Game-time ``now``: stuck at the pause instant while paused."""
        return self.last_pause_time if self.paused else now

    def elapsed_ms(self, now: int) -> int:
        return max(0, self.frozen(now) - self.game_start_time)

    def elapsed_seconds(self, now: int) -> int:
        return self.elapsed_ms(now) // 1000


def orb_age(spawn_time: int, now: int) -> int:
    return now - spawn_time


def orb_expired(spawn_time: int, now: int, lifespan: int = ORB_LIFESPAN) -> bool:
    return orb_age(spawn_time, now) >= lifespan


def orb_remaining_seconds(
    spawn_time: int, now: int, lifespan: int = ORB_LIFESPAN
) -> float:
    """Seconds left before the orb respawns, one decimal, never negative.

    Halves round up (250 ms reads 0.3), in integer milliseconds.
    """
    remaining = max(0, lifespan - orb_age(spawn_time, now))
    return (remaining + 50) // 100 / 10
