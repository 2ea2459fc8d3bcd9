"""Grid helpers: snapping, playable bounds, toroidal wrap and occupancy."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from .config import GRID_SIZE, UI_HEIGHT

Position = tuple[int, int]


def snap(value: float, cell: int = GRID_SIZE) -> int:
    """Floor ``value`` onto the grid."""
    return math.floor(value / cell) * cell


@dataclass(frozen=True, slots=True)
class Board:
    """Viewport dimensions plus the derived grid bounds.

    The whole viewport is the wrap space; the top ``ui_height`` pixels are
    reserved for the HUD and only excluded from orb spawns.
    """

    width: int
    height: int
    cell: int = GRID_SIZE
    ui_height: int = UI_HEIGHT

    @property
    def max_col(self) -> int:
        return self.width // self.cell - 1

    @property
    def min_row(self) -> int:
        return math.ceil(self.ui_height / self.cell)

    @property
    def max_row(self) -> int:
        return self.height // self.cell - 1

    @property
    def wrap_top(self) -> int:
        """Row pixel a snake lands on after leaving through the bottom edge."""
        return snap(self.ui_height, self.cell)

    @property
    def last_x(self) -> int:
        return snap(self.width, self.cell) - self.cell

    @property
    def last_y(self) -> int:
        return snap(self.height, self.cell) - self.cell

    def start_head(self) -> Position:
        """Grid-snapped center of the area below the HUD band."""
        return (
            snap(self.width / 2, self.cell),
            snap((self.height + self.ui_height) / 2, self.cell),
        )

    def can_start(self, length: int) -> bool:
        """True when a ``length``-cell snake fits left of the start head
        and at least one spawn row lies below the HUD band."""
        head_x, _ = self.start_head()
        tail_x = head_x - (length - 1) * self.cell
        return tail_x >= 0 and self.max_row >= self.min_row

    def wrap(self, pos: Position) -> Position:
        """Re-enter from the opposite edge, each axis independently."""
        x, y = pos
        if x < 0:
            x = self.last_x
        elif x >= self.width:
            x = 0

        if y < self.ui_height:
            y = self.last_y
        elif y >= self.height:
            y = self.wrap_top
        return x, y

    def spawn_cells(self) -> Iterator[Position]:
        """Every orb-eligible cell in row-major order."""
        for row in range(self.min_row, self.max_row + 1):
            for col in range(self.max_col + 1):
                yield col * self.cell, row * self.cell

    def spawn_capacity(self) -> int:
        cols = max(0, self.max_col + 1)
        rows = max(0, self.max_row - self.min_row + 1)
        return cols * rows


def step(pos: Position, direction: Position) -> Position:
    return pos[0] + direction[0], pos[1] + direction[1]


def occupied(pos: Position, segments: Iterable[Sequence[int]]) -> bool:
    """Return True when ``pos`` matches any segment exactly."""
    return any(pos[0] == seg[0] and pos[1] == seg[1] for seg in segments)


def axis_of(direction: Position) -> str | None:
    """Motion axis of a direction vector, ``None`` for the zero vector."""
    if direction[0]:
        return "x"
    if direction[1]:
        return "y"
    return None
