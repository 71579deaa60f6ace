"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import DIRECTION_STEPS, Direction
from .exceptions import InvalidGrid


Grid = List[List[str]]


@dataclass(frozen=True)
class Position:
    """A grid coordinate; ``x`` is the row and ``y`` the column."""

    x: int
    y: int

    def to_jsonable(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


PositionMap = Dict[str, List[Position]]


@dataclass
class Placement:
    """A candidate (or committed) location for a word."""

    word: str
    start_x: int
    start_y: int
    direction: Direction
    score: int = 0
    _positions: Optional[List[Position]] = field(default=None, repr=False, compare=False)

    @property
    def positions(self) -> List[Position]:
        if self._positions is None:
            dx, dy = DIRECTION_STEPS[self.direction]
            self._positions = [
                Position(self.start_x + dx * i, self.start_y + dy * i) for i in range(len(self.word))
            ]
        return self._positions


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def copy_positions(positions: PositionMap) -> PositionMap:
    # Position is frozen, so copying the lists is enough.
    return {word: list(cells) for word, cells in positions.items()}


@dataclass
class PuzzleSnapshot:
    """Detached copy of a puzzle: size, grid and placement registry."""

    size: int
    grid: Grid
    positions: PositionMap

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "grid": copy_grid(self.grid),
            "positions": {
                word: [pos.to_jsonable() for pos in cells]
                for word, cells in self.positions.items()
            },
        }

    @classmethod
    def from_jsonable(cls, payload: Dict[str, Any]) -> "PuzzleSnapshot":
        try:
            positions = {
                str(word): [Position(int(pos["x"]), int(pos["y"])) for pos in cells]
                for word, cells in payload["positions"].items()
            }
            grid = payload["grid"]
            size = int(payload.get("size", len(grid)))
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise InvalidGrid(f"Malformed puzzle snapshot: {exc}") from exc
        if not isinstance(grid, list) or any(not isinstance(row, list) for row in grid):
            raise InvalidGrid("Invalid grid format. Grid must be a 2D array.")
        return cls(size=size, grid=copy_grid(grid), positions=positions)
