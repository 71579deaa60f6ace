"""CLI entrypoint for the word search generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from wordsearch.core.constants import DEFAULT_MAX_ATTEMPTS, StrategyName
from wordsearch.core.exceptions import WordSearchError
from wordsearch.core.models import PuzzleSnapshot
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import print_puzzle_stats


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate word search puzzles")
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Words to hide in the grid")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--size", type=int, help="Grid size in cells (derived from the words if omitted)")
    parser.add_argument("--diagonal", action="store_true", help="Allow diagonal placement")
    parser.add_argument("--no-fill", action="store_true", help="Leave unused cells empty")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[s.value for s in StrategyName],
        default=StrategyName.SAMPLED.value,
        help="Placement search strategy",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Attempt budget per word for the sampled strategy",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    parser.add_argument("--output", type=Path, help="Optional path to write the output to")
    parser.add_argument(
        "--load",
        type=Path,
        metavar="FILE",
        help="Re-import a JSON snapshot produced with --format json instead of generating",
    )
    parser.add_argument("--stats", action="store_true", help="Print placement stats to stderr")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))

    snapshot = None
    if args.load:
        try:
            snapshot = PuzzleSnapshot.from_jsonable(json.loads(args.load.read_text(encoding="utf-8")))
        except json.JSONDecodeError as exc:
            parser.error(f"--load file is not valid JSON: {exc}")
        except WordSearchError as exc:
            parser.exit(2, f"{parser.prog}: error: {exc}\n")
        if not words:
            words = list(snapshot.positions)
    if not words:
        parser.error("provide --words, --words-file or --load")

    config = GeneratorConfig(
        words=words,
        size=snapshot.size if snapshot else args.size,
        allow_diagonal=args.diagonal,
        fill_blanks=not args.no_fill,
        seed=args.seed,
        strategy=args.strategy,
        max_attempts=args.max_attempts,
    )

    try:
        generator = WordSearchGenerator(config)
        if snapshot:
            generator.import_snapshot(snapshot)
        else:
            generator.generate()
    except WordSearchError as exc:
        parser.exit(2, f"{parser.prog}: error: {exc}\n")

    if args.stats:
        print_puzzle_stats(generator, stream=sys.stderr)

    if args.format == "json":
        output_text = json.dumps(generator.export().to_jsonable(), indent=2)
    else:
        output_text = generator.to_string()

    if args.output:
        args.output.write_text(output_text + "\n", encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
