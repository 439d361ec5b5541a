"""Conway's Game of Life on a toroidal grid.

Any live cell with fewer than two or more than three live neighbours dies.
Any live cell with two or three live neighbours lives on. Any dead cell with
exactly three live neighbours comes alive. The grid wraps around at every edge.
"""

from __future__ import annotations

import random
from collections import Counter
from typing import Iterator

__all__ = ["LifeGrid"]

Cell = tuple[int, int]

_NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)

# Cell states around the centre of a 3x3 block, keyed by (row, col) offset.
_GLIDER_BR = {
    (-1, -1): False, (-1, 0): True, (-1, 1): False,
    (0, -1): False, (0, 0): False, (0, 1): True,
    (1, -1): True, (1, 0): True, (1, 1): True,
}
_GLIDER_BL = {
    (-1, -1): False, (-1, 0): True, (-1, 1): False,
    (0, -1): True, (0, 0): False, (0, 1): False,
    (1, -1): True, (1, 0): True, (1, 1): True,
}


class LifeGrid:
    """A rows x cols Game of Life board whose edges wrap around."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("a grid needs at least one row and one column")
        self.rows = rows
        self.cols = cols
        self._alive: set[Cell] = set()
        self._ages: dict[Cell, int] = {}

    def _check(self, row: int, col: int) -> Cell:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        return row, col

    def _wrap(self, row: int, col: int) -> Cell:
        return row % self.rows, col % self.cols

    def _neighbors(self, row: int, col: int) -> Iterator[Cell]:
        for dr, dc in _NEIGHBOR_OFFSETS:
            yield self._wrap(row + dr, col + dc)

    def is_alive(self, row: int, col: int) -> bool:
        """Return True if the cell is alive."""
        return self._check(row, col) in self._alive

    def set_alive(self, row: int, col: int, alive: bool) -> None:
        """Bring a cell to life or kill it."""
        cell = self._check(row, col)
        if alive:
            self._alive.add(cell)
        else:
            self._alive.discard(cell)
            self._ages.pop(cell, None)

    def age(self, row: int, col: int) -> int:
        """Return how many generations the cell has lived through (0 if dead)."""
        return self._ages.get(self._check(row, col), 0)

    def living_neighbors(self, row: int, col: int) -> int:
        """Return the number of live cells among the eight neighbours."""
        self._check(row, col)
        return sum(cell in self._alive for cell in self._neighbors(row, col))

    def step(self) -> None:
        """Advance the board by one generation."""
        counts = Counter(
            neighbor for cell in self._alive for neighbor in self._neighbors(*cell)
        )
        survivors = {
            cell
            for cell, n in counts.items()
            if n == 3 or (n == 2 and cell in self._alive)
        }
        self._ages = {cell: self._ages.get(cell, 0) + 1 for cell in survivors}
        self._alive = survivors

    def _stamp(self, row: int, col: int, pattern: dict[Cell, bool]) -> None:
        self._check(row, col)
        for (dr, dc), alive in pattern.items():
            self.set_alive(*self._wrap(row + dr, col + dc), alive)

    def glider_br(self, row: int, col: int) -> None:
        """Place a glider centred on the cell that travels down and right."""
        self._stamp(row, col, _GLIDER_BR)

    def glider_bl(self, row: int, col: int) -> None:
        """Place a glider centred on the cell that travels down and left."""
        self._stamp(row, col, _GLIDER_BL)

    def spawn(self, count: int = 1000, rng: random.Random | None = None) -> None:
        """Scatter ``count`` pairs of gliders at random positions."""
        rng = rng or random.Random()
        for _ in range(count):
            self.glider_br(rng.randint(0, self.rows - 1), rng.randint(0, self.cols - 1))
            self.glider_bl(rng.randint(0, self.rows - 1), rng.randint(0, self.cols - 1))

    def live_cells(self) -> list[Cell]:
        """Return the live cells as sorted (row, col) pairs."""
        return sorted(self._alive)