"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple


EMPTY_CELL = ""
EMPTY_SYMBOL = "."
ALPHABET = string.ascii_uppercase

MIN_GRID_SIZE = 10
LETTERS_PER_ROW = 5
DEFAULT_MAX_ATTEMPTS = 300


class Direction(str, Enum):
    """Word directions supported by the grid."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


# (dx, dy) per letter; x is the row, y the column.
DIRECTION_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL: (1, 1),
}


class StrategyName(str, Enum):
    """Placement strategies selectable from configuration."""

    SAMPLED = "sampled"
    EXHAUSTIVE = "exhaustive"


def available_directions(allow_diagonal: bool) -> List[Direction]:
    """Return the directions in scan order."""

    directions = [Direction.HORIZONTAL, Direction.VERTICAL]
    if allow_diagonal:
        directions.append(Direction.DIAGONAL)
    return directions


@dataclass(frozen=True)
class Bounds:
    """Simple square bounds helper."""

    size: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size
