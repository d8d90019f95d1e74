"""Command-line interface for bitcombs."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from bitcombs.config import ENUMERATION_CONFIG, EnumerationConfig
from bitcombs.enumerate import (
    all_subsets,
    combinations,
    combinations_positions,
    iter_positions,
)
from bitcombs.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _parse_elements(raw: List[str], as_int: bool) -> List[Any]:
    """Return CLI elements, optionally converted to integers.

    Raises:
        ValueError: If ``as_int`` is set and an element is not an integer.
    """
    if not as_int:
        return list(raw)
    try:
        return [int(item) for item in raw]
    except ValueError as exc:
        raise ValueError(f"--int given but element is not an integer: {exc}") from None


def _enumerate(args: argparse.Namespace, config: EnumerationConfig) -> List[Any]:
    """Run the enumeration selected by ``args``."""
    elements = _parse_elements(args.elements, args.int)
    if args.command == "all":
        if args.positions:
            return list(iter_positions(elements, config=config))
        return all_subsets(elements, config=config)
    if args.positions:
        return combinations_positions(elements, args.r, config=config)
    return combinations(elements, args.r, config=config)


def _emit(results: List[Any], as_json: bool, count_only: bool) -> None:
    if count_only:
        print(len(results))
        return
    if as_json:
        print(json.dumps(results))
        return
    for item in results:
        print(json.dumps(item))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``bitcombs`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="bitcombs",
        description="Enumerate subsets of a list of elements by bitmask index.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{all,combinations}",
        help="Available commands",
    )

    all_parser = subparsers.add_parser("all", help="Every non-empty subset")
    comb_parser = subparsers.add_parser(
        "combinations", help="Subsets with exactly R elements"
    )
    comb_parser.add_argument(
        "-r", type=int, required=True, help="Number of elements per subset"
    )

    for p in (all_parser, comb_parser):
        p.add_argument("elements", nargs="*", help="Input elements, in order")
        p.add_argument(
            "--positions",
            "-p",
            action="store_true",
            help="Print bitmask indices (1-based positions) instead of subsets",
        )
        p.add_argument(
            "--json", action="store_true", help="Print one JSON document"
        )
        p.add_argument(
            "--count", action="store_true", help="Print only the number of results"
        )
        p.add_argument(
            "--int", action="store_true", help="Parse elements as integers"
        )
        p.add_argument(
            "--max-length",
            type=int,
            default=None,
            help=(
                "Longest accepted input (index width in bits, default:"
                f" {ENUMERATION_CONFIG.max_index_bits})"
            ),
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    config = ENUMERATION_CONFIG
    if args.max_length is not None:
        config = EnumerationConfig(
            max_index_bits=args.max_length, warn_length=config.warn_length
        )

    try:
        results = _enumerate(args, config)
    except (OverflowError, ValueError) as exc:
        logger.error(str(exc))
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from None

    _emit(results, args.json, args.count)


if __name__ == "__main__":
    main()
