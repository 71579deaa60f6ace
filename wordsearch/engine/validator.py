"""Deterministic validation for configurations and imported grids."""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Sequence

from ..core.constants import ALPHABET, EMPTY_CELL
from ..core.exceptions import InvalidConfiguration, InvalidGrid
from ..core.models import Position
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

WORD_PATTERN = re.compile(r"[A-Za-z]+")


def validate_config(size: int, words: Sequence[Any]) -> None:
    """Fail fast with :class:`InvalidConfiguration` on the first broken rule."""

    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidConfiguration(f"Grid size must be a positive integer, got {size!r}")
    if size < 1:
        raise InvalidConfiguration("Grid size must be positive")
    if not words:
        raise InvalidConfiguration("Words array cannot be empty")
    for word in words:
        if isinstance(word, str) and len(word) > size:
            raise InvalidConfiguration(f'Word "{word}" is longer than grid size {size}')
        if not isinstance(word, str) or not WORD_PATTERN.fullmatch(word):
            raise InvalidConfiguration(f'Word "{word}" contains invalid characters')


class GridValidator:
    """Checks an external grid and placement registry before adoption."""

    def __init__(self, size: int) -> None:
        self.size = size

    def validate(self, grid: Any, positions: Mapping[str, Sequence[Position]]) -> None:
        try:
            self._check_format(grid)
            self._check_dimensions(grid)
            self._check_placements(grid, positions)
            self._check_letters(grid)
        except InvalidGrid as exc:
            LOGGER.warning("Grid import rejected: %s", exc)
            raise

    @staticmethod
    def _check_format(grid: Any) -> None:
        if not isinstance(grid, list) or any(not isinstance(row, list) for row in grid):
            raise InvalidGrid("Invalid grid format. Grid must be a 2D array.")

    def _check_dimensions(self, grid: List[List[Any]]) -> None:
        if len(grid) != self.size or any(len(row) != self.size for row in grid):
            widths = sorted({len(row) for row in grid})
            raise InvalidGrid(
                f"Invalid grid dimensions. Expected {self.size}x{self.size}, "
                f"got {len(grid)} rows of width {widths}."
            )

    def _check_placements(
        self, grid: List[List[Any]], positions: Mapping[str, Sequence[Position]]
    ) -> None:
        for word, cells in positions.items():
            canonical = str(word).upper()
            if not isinstance(cells, (list, tuple)) or len(cells) != len(canonical):
                raise InvalidGrid("Grid contains mismatched word placements")
            for index, pos in enumerate(cells):
                if not self._is_position(pos):
                    raise InvalidGrid("Grid contains mismatched word placements")
                if not (0 <= pos.x < self.size and 0 <= pos.y < self.size):
                    raise InvalidGrid("Grid contains mismatched word placements")
                if grid[pos.x][pos.y] != canonical[index]:
                    raise InvalidGrid("Grid contains mismatched word placements")

    @staticmethod
    def _is_position(pos: Any) -> bool:
        return isinstance(pos, Position) and all(
            isinstance(coord, int) and not isinstance(coord, bool) for coord in (pos.x, pos.y)
        )

    @staticmethod
    def _check_letters(grid: List[List[Any]]) -> None:
        for x, row in enumerate(grid):
            for y, letter in enumerate(row):
                if letter == EMPTY_CELL:
                    continue
                if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
                    raise InvalidGrid(f"Invalid letter {letter!r} at ({x},{y})")
