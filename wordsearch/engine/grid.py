"""Grid representation and helper utilities."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Tuple

from ..core.constants import ALPHABET, DIRECTION_STEPS, EMPTY_CELL, Bounds, Direction
from ..core.models import Grid, Placement, Position, copy_grid


class LetterGrid:
    """Square letter buffer with placement helpers.

    Cells are indexed ``cells[x][y]``. A cell holds either ``EMPTY_CELL`` or a
    single uppercase letter; every mutation goes through :meth:`place` or
    :meth:`fill_blanks`.
    """

    def __init__(self, size: int) -> None:
        self.bounds = Bounds(size=size)
        self.cells: Grid = [[EMPTY_CELL for _ in range(size)] for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Grid) -> "LetterGrid":
        """Build a grid from already validated square rows."""

        grid = cls(len(rows))
        grid.cells = copy_grid(rows)
        return grid

    @property
    def size(self) -> int:
        return self.bounds.size

    # ------------------------------------------------------------------
    # Candidate evaluation
    # ------------------------------------------------------------------
    def step_cells(self, start_x: int, start_y: int, direction: Direction, length: int) -> List[Tuple[int, int]]:
        dx, dy = DIRECTION_STEPS[direction]
        return [(start_x + dx * i, start_y + dy * i) for i in range(length)]

    def can_place(self, word: str, start_x: int, start_y: int, direction: Direction) -> bool:
        """Return True when every letter lands in bounds on an empty or matching cell."""

        for index, (x, y) in enumerate(self.step_cells(start_x, start_y, direction, len(word))):
            if not self.bounds.contains(x, y):
                return False
            existing = self.cells[x][y]
            if existing != EMPTY_CELL and existing != word[index]:
                return False
        return True

    def score(self, word: str, start_x: int, start_y: int, direction: Direction) -> int:
        """Count the in-bounds cells of a candidate that are still empty."""

        return sum(
            1
            for x, y in self.step_cells(start_x, start_y, direction, len(word))
            if self.bounds.contains(x, y) and self.cells[x][y] == EMPTY_CELL
        )

    def evaluate(self, word: str, start_x: int, start_y: int, direction: Direction) -> Optional[Placement]:
        """Return a scored placement for a feasible candidate, otherwise None."""

        if not self.can_place(word, start_x, start_y, direction):
            return None
        return Placement(
            word=word,
            start_x=start_x,
            start_y=start_y,
            direction=direction,
            score=self.score(word, start_x, start_y, direction),
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place(self, placement: Placement) -> List[Position]:
        """Write a feasible placement and return the positions it occupies."""

        positions = placement.positions
        for index, pos in enumerate(positions):
            self.cells[pos.x][pos.y] = placement.word[index]
        return list(positions)

    def fill_blanks(self, rng: random.Random) -> int:
        """Assign a random letter to every empty cell and return how many were filled."""

        filled = 0
        for row in self.cells:
            for y, letter in enumerate(row):
                if letter == EMPTY_CELL:
                    row[y] = rng.choice(ALPHABET)
                    filled += 1
        return filled

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def letter_at(self, pos: Position) -> str:
        return self.cells[pos.x][pos.y]

    def trace(self, positions: Iterable[Position]) -> str:
        return "".join(self.letter_at(pos) for pos in positions)

    def rows(self) -> Grid:
        return copy_grid(self.cells)
