"""Grid sizing derived from the word list."""

from __future__ import annotations

import math
from typing import Sequence

from ..core.constants import LETTERS_PER_ROW, MIN_GRID_SIZE


def calculate_grid_size(words: Sequence[str]) -> int:
    """Return ``max(ceil(total_letters / LETTERS_PER_ROW), MIN_GRID_SIZE)``."""

    total_letters = sum(len(word) for word in words)
    return max(math.ceil(total_letters / LETTERS_PER_ROW), MIN_GRID_SIZE)
