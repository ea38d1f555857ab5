"""Command-line interface.

Usage:
    footmark INPUT OUTPUT [--chunk-size N] [--nesting {nested,flat}]
             [--unmatched-close {plain,drop,error}]
             [--unterminated {footnote,text,drop}] [--sink-errors {raise,log}]
             [--append] [-v]

Exit codes:
    0  success
    2  bad arguments
    3  input could not be opened
    4  output could not be opened
    5  processing failed partway
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from footmark import __version__
from footmark.config import (
    DEFAULT_CHUNK_SIZE,
    NestingMode,
    ProcessConfig,
    SinkErrorPolicy,
    UnmatchedClosePolicy,
    UnterminatedPolicy,
)
from footmark.errors import (
    FootmarkError,
    InputUnavailableError,
    OutputUnavailableError,
)
from footmark.pipeline import convert_file
from footmark.utils.logger import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_INPUT_UNAVAILABLE = 3
EXIT_OUTPUT_UNAVAILABLE = 4
EXIT_FAILED = 5


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="footmark",
        description=(
            "Replace (inline footnotes) with ^N references and dump the footnote "
            "bodies wherever '#' appears, and at the end of the document."
        ),
    )
    parser.add_argument("input", help="Document to read")
    parser.add_argument("output", help="File to write, or '-' for standard output")
    parser.add_argument(
        "--chunk-size",
        type=_positive_int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Bytes read per chunk (default: {DEFAULT_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--nesting",
        choices=[m.value for m in NestingMode],
        default=NestingMode.NESTED.value,
        help="Nested footnote handling (default: nested)",
    )
    parser.add_argument(
        "--unmatched-close",
        choices=[p.value for p in UnmatchedClosePolicy],
        default=UnmatchedClosePolicy.PLAIN.value,
        help="What to do with ')' outside any footnote (default: plain)",
    )
    parser.add_argument(
        "--unterminated",
        choices=[p.value for p in UnterminatedPolicy],
        default=UnterminatedPolicy.FOOTNOTE.value,
        help="What to do with a footnote still open at end of input (default: footnote)",
    )
    parser.add_argument(
        "--sink-errors",
        choices=[p.value for p in SinkErrorPolicy],
        default=SinkErrorPolicy.RAISE.value,
        help="Abort on a failed output write, or log it and keep going (default: raise)",
    )
    parser.add_argument(
        "--append", action="store_true", help="Append to OUTPUT instead of overwriting it"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ProcessConfig.from_dict(
        {
            "chunk_size": args.chunk_size,
            "nesting": args.nesting,
            "unmatched_close": args.unmatched_close,
            "unterminated": args.unterminated,
            "sink_errors": args.sink_errors,
        }
    )

    try:
        convert_file(args.input, args.output, append=args.append, config=config)
    except InputUnavailableError as err:
        print(f"footmark: {err}", file=sys.stderr)
        return EXIT_INPUT_UNAVAILABLE
    except OutputUnavailableError as err:
        print(f"footmark: {err}", file=sys.stderr)
        return EXIT_OUTPUT_UNAVAILABLE
    except FootmarkError as err:
        print(f"footmark: failed partway through {args.input}: {err}", file=sys.stderr)
        return EXIT_FAILED

    logger.info("Footnotes extracted and formatted")
    return EXIT_OK


__all__ = ["build_parser", "main"]
