"""Command line entry point for the Roster Sorter library."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .classifier import ClassifierConfig
from .pipeline import RosterSorterConfig
from .runner import sort_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sort a class roster: numbers/symbols first, then Latin and Chinese names by pinyin."
    )
    parser.add_argument("input", type=Path, help="Path to the input CSV, Excel or text file (one name per line)")
    parser.add_argument("output", type=Path, help="Path where the sorted roster will be written")
    parser.add_argument("--name-column", default="name", help="Column containing the names (default: name)")
    parser.add_argument("--dedupe", action="store_true", help="Drop repeated names, keeping the first")
    parser.add_argument(
        "--raw-tiebreak",
        action="store_true",
        help="Order names with identical pinyin by their original text",
    )
    parser.add_argument(
        "--locale-collation",
        action="store_true",
        help="Compare sort keys with the process locale instead of case-insensitive ordering",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    parser.add_argument("--show-index", action="store_true", help="Print the letter index after sorting")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    config = RosterSorterConfig(
        name_column=args.name_column,
        deduplicate=args.dedupe,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
        classifier=ClassifierConfig(
            raw_tiebreak=args.raw_tiebreak,
            use_locale_collation=args.locale_collation,
        ),
    )

    result = sort_file(args.input, args.output, config)
    if result is None:
        return 1

    if args.show_index:
        for letter in result.letters:
            print(f"{letter}: {', '.join(result.groups[letter])}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
