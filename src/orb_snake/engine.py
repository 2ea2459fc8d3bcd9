"""Orb Snake simulation core: one grid step per tick, no rendering, no clock."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass

from .clock import RunClock, orb_expired, orb_remaining_seconds
from .config import (
    DIRECTIONS,
    GRID_SIZE,
    MAX_SPAWN_ATTEMPTS,
    ORB_LIFESPAN,
    UI_HEIGHT,
)
from .geometry import Board, Position, axis_of, occupied, step

logger = logging.getLogger(__name__)

START_LENGTH = 3
STILL: Position = (0, 0)


class GameStatus(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


@dataclass(slots=True)
class Orb:
    """The collectible: a cell plus the game-time it appeared."""

    pos: Position
    spawn_time: int


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view handed to the presentation layer."""

    segments: tuple[Position, ...]
    orb: Position | None
    score: int
    elapsed_seconds: int
    orb_remaining_seconds: float
    status: GameStatus


class SnakeEngine:
    """Owns the snake, the orb, the score and the run clock.

    Every entry point takes ``now`` in integer milliseconds; the engine never
    reads a real clock, so it can be driven by a timer loop or by a test.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        cell: int = GRID_SIZE,
        ui_height: int = UI_HEIGHT,
        lifespan: int = ORB_LIFESPAN,
        max_spawn_attempts: int = MAX_SPAWN_ATTEMPTS,
    ) -> None:
        self.rng = rng or random.Random()
        self.cell = cell
        self.ui_height = ui_height
        self.lifespan = lifespan
        self.max_spawn_attempts = max_spawn_attempts

        self.board = Board(0, 0, cell, ui_height)
        self.snake: list[Position] = []
        self.direction: Position = STILL
        self.pending_direction: Position = STILL
        self.orb: Orb | None = None
        self.score = 0
        self.status = GameStatus.NOT_STARTED
        self.clock = RunClock()

        self._elapsed_seconds = 0
        self._orb_remaining = 0.0

    # --- Lifecycle -----------------------------------------------------

    def initialize(self, width: int, height: int, now: int) -> None:
        """Start (or restart) a run on a ``width`` x ``height`` viewport."""
        board = Board(width, height, self.cell, self.ui_height)
        head_x, head_y = board.start_head()
        if not board.can_start(START_LENGTH):
            raise ValueError(f"viewport {width}x{height} is too small to play on")

        self.board = board
        self.score = 0
        self.snake = [(head_x - i * self.cell, head_y) for i in range(START_LENGTH)]
        self.direction = (self.cell, 0)
        self.pending_direction = self.direction
        self.clock.start(now)
        self.status = GameStatus.RUNNING
        logger.info(
            "Run started on %dx%d viewport, head at %s", width, height, self.snake[0]
        )
        if not self.spawn_orb(now):
            self._finish("no room for an orb")
        self._refresh_timers(now)

    def _finish(self, reason: str) -> None:
        self.status = GameStatus.OVER
        logger.info("Game over (%s), final score %d", reason, self.score)

    # --- Orb -----------------------------------------------------------

    def spawn_orb(self, now: int) -> bool:
        """Place a fresh orb on a random free playable cell.

        Returns False (and clears the orb) when every playable cell is
        covered by the snake.
        """
        pos = self._random_free_cell()
        if pos is None:
            pos = self._first_free_cell()
        if pos is None:
            self.orb = None
            return False
        self.orb = Orb(pos, now)
        logger.debug("Orb spawned at %s", pos)
        return True

    def _random_free_cell(self) -> Position | None:
        board = self.board
        if board.spawn_capacity() <= 0:
            return None
        for _ in range(self.max_spawn_attempts):
            pos = (
                self.rng.randint(0, board.max_col) * self.cell,
                self.rng.randint(board.min_row, board.max_row) * self.cell,
            )
            if not occupied(pos, self.snake):
                return pos
        return None

    def _first_free_cell(self) -> Position | None:
        logger.debug("Random orb placement gave up, scanning for a free cell")
        taken = set(self.snake)
        for pos in self.board.spawn_cells():
            if pos not in taken:
                return pos
        return None

    # --- Input ---------------------------------------------------------

    def set_pending_direction(self, axis: str, sign: int) -> bool:
        """Queue a turn onto ``axis``; only turns across the current axis count."""
        if self.status is not GameStatus.RUNNING:
            logger.debug("Ignoring turn while %s", self.status.value)
            return False
        if axis not in ("x", "y") or sign not in (-1, 1):
            logger.debug("Ignoring malformed turn %r %r", axis, sign)
            return False
        if axis == axis_of(self.direction):
            return False
        delta = sign * self.cell
        self.pending_direction = (delta, 0) if axis == "x" else (0, delta)
        return True

    def steer(self, name: str) -> bool:
        """Named variant of :meth:`set_pending_direction` (``"UP"`` etc.)."""
        try:
            axis, sign = DIRECTIONS[name]
        except KeyError:
            logger.debug("Unknown direction %r", name)
            return False
        return self.set_pending_direction(axis, sign)

    # --- Pause ---------------------------------------------------------

    def pause(self, now: int) -> bool:
        if self.status is not GameStatus.RUNNING:
            return False
        self._refresh_timers(now)
        self.clock.pause(now)
        self.status = GameStatus.PAUSED
        logger.info("Paused at %ds", self._elapsed_seconds)
        return True

    def resume(self, now: int) -> bool:
        if self.status is not GameStatus.PAUSED:
            return False
        paused_for = self.clock.resume(now)
        if self.orb is not None:
            self.orb.spawn_time += paused_for
        self.status = GameStatus.RUNNING
        self._refresh_timers(now)
        logger.info("Resumed after %d ms", paused_for)
        return True

    def toggle(self, now: int) -> bool:
        """Pause a running game or resume a paused one."""
        if self.status is GameStatus.RUNNING:
            return self.pause(now)
        if self.status is GameStatus.PAUSED:
            return self.resume(now)
        return False

    # --- Logic step ----------------------------------------------------

    def advance_tick(self, now: int) -> None:
        """Advance the game state by exactly one grid cell."""
        if self.status is not GameStatus.RUNNING:
            return

        self.direction = self.pending_direction
        head = self.board.wrap(step(self.snake[0], self.direction))

        if occupied(head, self.snake):
            self._finish("self collision")
            return

        self.snake.insert(0, head)
        if self.orb is not None and head == self.orb.pos:
            self.score += 1
            if not self.spawn_orb(now):
                self._finish("board full")
                return
        else:
            self.snake.pop()

        # the countdown for this tick reads the orb as it was before expiry
        remaining = self.orb_remaining_seconds(now)
        if self.orb is not None and orb_expired(self.orb.spawn_time, now, self.lifespan):
            self.spawn_orb(now)

        self._elapsed_seconds = self.elapsed_seconds(now)
        self._orb_remaining = remaining

    # --- Read side -----------------------------------------------------

    def elapsed_seconds(self, now: int) -> int:
        return self.clock.elapsed_seconds(now)

    def orb_remaining_seconds(self, now: int) -> float:
        if self.orb is None:
            return 0.0
        return orb_remaining_seconds(
            self.orb.spawn_time, self.clock.frozen(now), self.lifespan
        )

    def _refresh_timers(self, now: int) -> None:
        self._elapsed_seconds = self.elapsed_seconds(now)
        self._orb_remaining = self.orb_remaining_seconds(now)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            segments=tuple(self.snake),
            orb=self.orb.pos if self.orb is not None else None,
            score=self.score,
            elapsed_seconds=self._elapsed_seconds,
            orb_remaining_seconds=self._orb_remaining,
            status=self.status,
        )
