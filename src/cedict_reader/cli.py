"""CLI entrypoint that streams CC-CEDICT lines through the parser."""

from __future__ import annotations

import argparse
from collections import Counter
import gzip
import logging
from pathlib import Path
import sys
from typing import Iterator, Sequence, TextIO

from cedict_reader.errors import CedictParseError, GlossLeadInError, SkippedLineError
from cedict_reader.formatting import format_entry, tone_marked
from cedict_reader.parser import new_parser

logger = logging.getLogger(__name__)


def _open_input(path: Path) -> TextIO:
    """Open a dictionary file for reading, handling ``.gz`` transparently."""

    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding="utf-8")
    return path.open("r", encoding="utf-8")


def _iter_lines(path: Path | None) -> Iterator[str]:
    if path is None:
        yield from sys.stdin
        return
    with _open_input(path) as handle:
        yield from handle


def _summary_key(error: CedictParseError) -> str:
    if isinstance(error, GlossLeadInError):
        return "failed to read gloss for line"
    return error.tag


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the reader command.
    """

    parser = argparse.ArgumentParser(description="Parse CC-CEDICT records and print them.")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="CC-CEDICT .u8 file (optionally .gz); reads standard input when omitted.",
    )
    parser.add_argument(
        "--tone-marks",
        action="store_true",
        help="Append tone-marked pinyin to every printed entry.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a table of error counts per diagnostic tag.",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop with a non-zero exit status at the first malformed line.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the reader over a file or standard input.

    Returns:
        Zero on success; one when ``--fail-fast`` stops on a malformed line.
    """

    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.path is not None and not args.path.exists():
        raise SystemExit(f"Input not found: {args.path}")

    line_parser = new_parser()
    error_counts: Counter[str] = Counter()
    parsed = 0
    skipped = 0

    for line_number, line in enumerate(_iter_lines(args.path), start=1):
        try:
            entry = line_parser.parse(line)
        except SkippedLineError as error:
            skipped += 1
            logger.debug("line %d skipped (%s)", line_number, error.tag)
            continue
        except CedictParseError as error:
            error_counts[_summary_key(error)] += 1
            print(error)
            if args.fail_fast:
                logger.error("stopping at line %d", line_number)
                return 1
            continue

        parsed += 1
        if args.tone_marks:
            print(f"{format_entry(entry)} {tone_marked(entry)}")
        else:
            print(format_entry(entry))

    if args.summary:
        print(
            f"\nParsed {parsed} entries, {sum(error_counts.values())} errors, "
            f"{skipped} skipped lines."
        )
        if error_counts:
            rows = [
                [tag, str(count)]
                for tag, count in sorted(error_counts.items(), key=lambda item: (-item[1], item[0]))
            ]
            print(_format_table(["error", "count"], rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
