"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..core.constants import DIRECTION_STEPS, EMPTY_CELL, EMPTY_SYMBOL, Direction

if TYPE_CHECKING:
    from ..engine.generator import WordSearchGenerator


def cell_symbol(letter: str) -> str:
    return letter if letter != EMPTY_CELL else EMPTY_SYMBOL


def format_grid(rows: Sequence[Sequence[str]]) -> str:
    """Rows joined by single spaces, separated by newlines."""

    return "\n".join(" ".join(cell_symbol(letter) for letter in row) for row in rows)


def format_board(rows: Sequence[Sequence[str]]) -> str:
    """Render the grid with row and column coordinates."""

    width = len(rows[0]) if rows else 0
    header_cells = [f"{y:>2}" for y in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for x, row in enumerate(rows):
        row_render = " ".join(f"{cell_symbol(letter):>2}" for letter in row)
        lines.append(f"{x:>2} | {row_render}")
    return "\n".join(lines)


def infer_direction(cells) -> Optional[Direction]:
    if len(cells) < 2:
        return None
    dx = cells[1].x - cells[0].x
    dy = cells[1].y - cells[0].y
    for direction, step in DIRECTION_STEPS.items():
        if (dx, dy) == step:
            return direction
    return None


def print_puzzle_stats(generator: WordSearchGenerator, *, stream=None) -> None:
    """Print grid + placement stats for a generated puzzle."""

    stream = stream or sys.stdout
    rows = generator.get_grid()
    positions = generator.get_positions()
    print(format_board(rows), file=stream)

    size = generator.get_grid_size()
    total_cells = size * size
    coverage = Counter(pos for cells in positions.values() for pos in cells)
    covered = len(coverage)
    shared = sum(1 for count in coverage.values() if count > 1)
    blanks = sum(1 for row in rows for letter in row if letter == EMPTY_CELL)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {size} x {size} ({total_cells} cells)", file=stream)
    if total_cells:
        print(f"  Word cells:    {covered} ({covered / total_cells * 100:.0f}%)", file=stream)
    print(f"  Shared cells:  {shared}", file=stream)
    if blanks:
        print(f"  Unfilled:      {blanks}", file=stream)

    lengths: List[int] = [len(word) for word in positions]
    directions = Counter(infer_direction(cells) for cells in positions.values())

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(positions)}", file=stream)
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
    dist_parts = [
        f"{direction.value}:{directions[direction]}"
        for direction in Direction
        if directions.get(direction)
    ]
    if dist_parts:
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)

    if generator.config.seed is not None:
        print(file=stream)
        print(f"Seed: {generator.config.seed}", file=stream)
