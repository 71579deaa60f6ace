"""Main word search generator orchestration.

Each generation cycle runs:
  1. Sizing: derive the grid size from the words unless one is given.
  2. Validation: reject malformed configuration before any grid work.
  3. Placement: place words longest first using the configured strategy.
  4. Fill: populate remaining empty cells with random letters.

Generation works on a scratch grid and only replaces the published grid and
placement registry once every word has been placed.
"""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from ..core.constants import DEFAULT_MAX_ATTEMPTS, StrategyName, available_directions
from ..core.exceptions import InvalidConfiguration, PlacementFailure
from ..core.models import Grid, Position, PositionMap, PuzzleSnapshot, copy_positions
from ..utils.logger import get_logger
from ..utils.pretty import format_grid
from .grid import LetterGrid
from .placement import ExhaustivePlacement, PlacementStrategy, SampledPlacement
from .sizing import calculate_grid_size
from .validator import GridValidator, validate_config


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    words: Sequence[str]
    size: Optional[int] = None
    allow_diagonal: bool = False
    fill_blanks: bool = True
    seed: Optional[int] = None
    strategy: str = StrategyName.SAMPLED.value
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def build_strategy(self, rng: random.Random) -> PlacementStrategy:
        try:
            name = StrategyName(self.strategy)
        except ValueError:
            raise InvalidConfiguration(f"Unknown placement strategy: {self.strategy!r}") from None
        if name == StrategyName.EXHAUSTIVE:
            return ExhaustivePlacement()
        return SampledPlacement(rng, max_attempts=self.max_attempts)


class WordSearchGenerator:
    """High-level orchestrator: sizing, validation, placement and fill."""

    def __init__(
        self,
        config: GeneratorConfig,
        strategy: Optional[PlacementStrategy] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.rng = rng or random.Random(config.seed)
        raw_words = list(config.words)
        self._size = config.size if config.size is not None else calculate_grid_size(
            [word for word in raw_words if isinstance(word, str)]
        )
        validate_config(self._size, raw_words)
        self._words: List[str] = [word.upper() for word in raw_words]
        self._allow_diagonal = config.allow_diagonal
        self._fill_blanks = config.fill_blanks
        self.strategy = strategy or config.build_strategy(self.rng)
        self.grid = LetterGrid(self._size)
        self.positions: PositionMap = {}

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def words(self) -> List[str]:
        return list(self._words)

    @property
    def size(self) -> int:
        return self._size

    @property
    def allow_diagonal(self) -> bool:
        return self._allow_diagonal

    @property
    def fill_blanks(self) -> bool:
        return self._fill_blanks

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> Grid:
        """Generate a new puzzle and return a copy of its grid."""

        validate_config(self._size, self._words)
        directions = available_directions(self._allow_diagonal)
        LOGGER.info(
            "Generating %dx%d puzzle with %d words (%s)",
            self._size,
            self._size,
            len(self._words),
            ", ".join(direction.value for direction in directions),
        )

        scratch = LetterGrid(self._size)
        placed: PositionMap = {}
        for word in self._placement_order():
            placement = self.strategy.find_placement(scratch, word, directions)
            if placement is None:
                LOGGER.warning("Unable to place %s on %dx%d grid", word, self._size, self._size)
                raise PlacementFailure(word)
            placed[word] = scratch.place(placement)
            LOGGER.debug(
                "Placed %s at (%d,%d) %s, score %d",
                word,
                placement.start_x,
                placement.start_y,
                placement.direction.value,
                placement.score,
            )

        if self._fill_blanks:
            filled = scratch.fill_blanks(self.rng)
            LOGGER.debug("Filled %d blank cells", filled)

        self.grid = scratch
        self.positions = placed
        LOGGER.info("Word search generation completed with %d words", len(placed))
        return self.get_grid()

    def reset(self) -> None:
        self.grid = LetterGrid(self._size)
        self.positions = {}

    def _placement_order(self) -> List[str]:
        # Stable sort: equal lengths keep their input order.
        return sorted(self._words, key=len, reverse=True)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def has_word(self, word: str) -> bool:
        return word.upper() in self.positions

    def get_word_positions(self, word: str) -> Optional[List[Position]]:
        cells = self.positions.get(word.upper())
        return list(cells) if cells is not None else None

    def get_positions(self) -> Dict[str, List[Position]]:
        return copy_positions(self.positions)

    def get_grid(self) -> Grid:
        return self.grid.rows()

    def get_grid_size(self) -> int:
        return self.grid.size

    def to_string(self) -> str:
        return format_grid(self.grid.cells)

    def __str__(self) -> str:
        return self.to_string()

    def print_grid(self, stream=None) -> None:
        stream = stream or sys.stdout
        print(self.to_string(), file=stream)

    # ------------------------------------------------------------------
    # Export / import
    # ------------------------------------------------------------------
    def export(self) -> PuzzleSnapshot:
        return PuzzleSnapshot(
            size=self.get_grid_size(),
            grid=self.get_grid(),
            positions=self.get_positions(),
        )

    def import_grid(self, grid: Grid, positions: Mapping[str, Sequence[Position]]) -> None:
        """Validate and adopt an external grid and placement registry.

        The configured size never changes; a grid of any other dimension is
        rejected. Validation completes before any state is touched.
        """

        GridValidator(self._size).validate(grid, positions)
        self.grid = LetterGrid.from_rows(grid)
        self.positions = {str(word).upper(): list(cells) for word, cells in positions.items()}
        LOGGER.info("Imported %dx%d grid with %d words", self._size, self._size, len(self.positions))

    def import_snapshot(self, snapshot: PuzzleSnapshot) -> None:
        self.import_grid(snapshot.grid, snapshot.positions)
