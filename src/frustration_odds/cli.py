"""Command-line entry point for :mod:`frustration_odds`.

Prints the chance of winning Frustration solitaire for one deck shape, or
builds a table of chances for a range of shapes.

Example
-------
python -m frustration_odds.cli --ranks 13 --suits 4 --sentence
python -m frustration_odds.cli --table-max-ranks 13 --table-max-suits 4 --out-csv ./output/chances.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .chance import build_chance_table, calculate_win_chance
from .data import EngineConfig, InvalidConfiguration
from .export import chance_table_records, format_plain, format_sentence
from .io import load_engine_config_from_json, write_chance_table_csv, write_chance_table_json

logger = logging.getLogger(__name__)


def configure_logging(*, level: int = logging.INFO) -> None:
    """Configure a simple root logger.

    This is safe to call multiple times.
    """

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
    else:
        root.setLevel(level)


def _lenient_positive_int(value: str) -> Optional[int]:
    """Parse a positive integer, returning None instead of failing so callers can fall back."""

    try:
        parsed = int(value.strip())
    except ValueError:
        return None
    return parsed if parsed >= 1 else None


def _resolve_count(*, raw: Optional[str], default: int, label: str) -> int:
    if raw is None:
        return default

    parsed = _lenient_positive_int(raw)
    if parsed is None:
        logger.warning("Invalid %s value %r, falling back to default %d", label, raw, default)
        return default
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frustration-odds",
        description="Exact chance of winning Frustration solitaire, computed with rook polynomials.",
    )
    parser.add_argument(
        "--ranks",
        type=str,
        default=None,
        help="Number of distinct ranks in the deck (default: 13, or default_ranks from --config)",
    )
    parser.add_argument(
        "--suits",
        type=str,
        default=None,
        help="Number of distinct suits in the deck (default: 4, or default_suits from --config)",
    )
    parser.add_argument(
        "--decimal-places",
        type=int,
        default=None,
        help="Decimal places of the printed percentage (default: 3, or decimal_places from --config)",
    )
    parser.add_argument(
        "--sentence",
        action="store_true",
        help="Print a sentence instead of the bare percentage",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with default_ranks, default_suits, decimal_places, max_total_cards (optional)",
    )
    parser.add_argument(
        "--table-max-ranks",
        type=int,
        default=None,
        help="Build a table for ranks 1..N instead of a single chance",
    )
    parser.add_argument(
        "--table-max-suits",
        type=int,
        default=None,
        help="Build a table for suits 1..N instead of a single chance",
    )
    parser.add_argument(
        "--out-csv",
        type=Path,
        default=None,
        help="Write the chance table to this CSV file (table mode only)",
    )
    parser.add_argument(
        "--out-json",
        type=Path,
        default=None,
        help="Write the chance table to this JSON file (table mode only)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def _run_table(*, args: argparse.Namespace, config: EngineConfig, decimal_places: int) -> None:
    max_ranks = args.table_max_ranks if args.table_max_ranks is not None else config.default_ranks
    max_suits = args.table_max_suits if args.table_max_suits is not None else config.default_suits

    table = build_chance_table(max_ranks, max_suits, max_total_cards=config.max_total_cards)
    records = chance_table_records(table, decimal_places=decimal_places)

    for rec in records:
        print(f"{rec['ranks']:>4} x {rec['suits']:<4} {rec['percentage']:>12}%")

    if args.out_csv is not None:
        out = write_chance_table_csv(args.out_csv, records)
        logger.info("Wrote %d rows to %s", len(records), out)
    if args.out_json is not None:
        out = write_chance_table_json(args.out_json, records)
        logger.info("Wrote %d rows to %s", len(records), out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(level=getattr(logging, args.log_level))

    try:
        config = load_engine_config_from_json(args.config) if args.config is not None else EngineConfig()
        decimal_places = args.decimal_places if args.decimal_places is not None else config.decimal_places
        if decimal_places < 0:
            raise ValueError(f"--decimal-places must be >= 0, got {decimal_places}")

        if args.table_max_ranks is not None or args.table_max_suits is not None:
            _run_table(args=args, config=config, decimal_places=decimal_places)
            return 0

        ranks = _resolve_count(raw=args.ranks, default=config.default_ranks, label="ranks")
        suits = _resolve_count(raw=args.suits, default=config.default_suits, label="suits")

        chance = calculate_win_chance(ranks, suits, max_total_cards=config.max_total_cards)
        logger.info("Computed win chance for %dx%d deck", ranks, suits)

        if args.sentence:
            print(format_sentence(chance, decimal_places))
        else:
            print(format_plain(chance, decimal_places))
        return 0

    except InvalidConfiguration as e:
        print(f"Error: invalid deck configuration - {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
