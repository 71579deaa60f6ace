"""Word search puzzle generator.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.WordSearchGenerator``: sizes, validates, places and fills.
- ``wordsearch.engine.placement``: exhaustive and sampled placement strategies.
- ``wordsearch.core.models.PuzzleSnapshot``: the export/import snapshot shape.
"""

from .core.constants import Direction
from .core.exceptions import InvalidConfiguration, InvalidGrid, PlacementFailure, WordSearchError
from .core.models import Position, PuzzleSnapshot
from .engine.generator import GeneratorConfig, WordSearchGenerator
from .engine.placement import ExhaustivePlacement, PlacementStrategy, SampledPlacement

__all__ = [
    "Direction",
    "ExhaustivePlacement",
    "GeneratorConfig",
    "InvalidConfiguration",
    "InvalidGrid",
    "PlacementFailure",
    "PlacementStrategy",
    "Position",
    "PuzzleSnapshot",
    "SampledPlacement",
    "WordSearchError",
    "WordSearchGenerator",
]

__version__ = "0.1.0"
