"""Placement search strategies.

Both strategies share one contract: given the current grid, a word and the
allowed directions, return the best feasible :class:`Placement` they can find
or ``None``. Feasibility is a hard filter; the score (count of still-empty
cells a candidate covers) only orders feasible candidates, and a candidate
replaces the current best only when its score is strictly higher.

``ExhaustivePlacement`` scans directions in the given order, then ``x``
ascending, then ``y`` ascending, so ties resolve to the first candidate in
scan order and results are fully deterministic.

``SampledPlacement`` draws a bounded number of random candidates from the
injected RNG. It trades completeness for speed on large boards and may miss a
placement the exhaustive scan would find.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence

from ..core.constants import DEFAULT_MAX_ATTEMPTS, Direction
from ..core.exceptions import InvalidConfiguration
from ..core.models import Placement
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


class PlacementStrategy(Protocol):
    """Protocol implemented by all placement searches."""

    def find_placement(
        self, grid: LetterGrid, word: str, directions: Sequence[Direction]
    ) -> Optional[Placement]:
        ...


class ExhaustivePlacement:
    """Best-fit scan over every direction and start cell."""

    def find_placement(
        self, grid: LetterGrid, word: str, directions: Sequence[Direction]
    ) -> Optional[Placement]:
        best: Optional[Placement] = None
        for direction in directions:
            for x in range(grid.size):
                for y in range(grid.size):
                    candidate = grid.evaluate(word, x, y, direction)
                    if candidate is None:
                        continue
                    if best is None or candidate.score > best.score:
                        best = candidate
                        if best.score == len(word):
                            # Nothing can beat a placement on fully empty cells.
                            LOGGER.debug("Exhaustive scan found open placement for %s", word)
                            return best
        if best is None:
            LOGGER.debug("Exhaustive scan found no placement for %s", word)
        return best


class SampledPlacement:
    """Random sampling with a fixed attempt budget."""

    def __init__(self, rng: random.Random, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> None:
        if max_attempts < 1:
            raise InvalidConfiguration("max_attempts must be positive")
        self.rng = rng
        self.max_attempts = max_attempts

    def find_placement(
        self, grid: LetterGrid, word: str, directions: Sequence[Direction]
    ) -> Optional[Placement]:
        best: Optional[Placement] = None
        feasible = 0
        choices = list(directions)
        for _ in range(self.max_attempts):
            direction = self.rng.choice(choices)
            x = self.rng.randrange(grid.size)
            y = self.rng.randrange(grid.size)
            candidate = grid.evaluate(word, x, y, direction)
            if candidate is None:
                continue
            feasible += 1
            if best is None or candidate.score > best.score:
                best = candidate
        LOGGER.debug(
            "Sampled %d candidates for %s: %d feasible, best score %s",
            self.max_attempts,
            word,
            feasible,
            best.score if best else None,
        )
        return best
