"""Command-line interface for titlecaps.

WHY: Headings and titles usually arrive from a shell pipeline or a text
file, not from Python code. The CLI exposes convert() to those workflows
without anyone writing a script.

HOW: Uses argparse to take text as positional words, from a file (-f), or
from stdin. Wordlists given with -w (or TITLECAPS_WORDLIST) are merged into
one override callback. The result goes to stdout or to the -o file.

RULES:
- Usage:
    titlecaps a tale of two cities
    titlecaps -f headings.txt -o headings-title.txt
    cat headings.txt | titlecaps -w acronyms.txt
- Positional text wins over -f; with neither, stdin is read.
- Command-line flags win over config.py defaults.
- Status and errors go to stderr. Exit codes: 0 = success, 1 = error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__, config
from .core import convert
from .errors import TitlecapsError
from .models import Override
from .wordlist import load_wordlist, wordlist_override

logger = logging.getLogger(__name__)


def _error(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr, flush=True)


def _read_input(args: argparse.Namespace) -> str:
    if args.text:
        return " ".join(args.text)
    if args.input_file and args.input_file != "-":
        with open(args.input_file, "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def _build_override(paths: List[str]) -> Optional[Override]:
    terms: List[str] = []
    for path in paths:
        terms.extend(load_wordlist(path))
    if not terms:
        return None
    logger.info("Using %d wordlist term(s)", len(terms))
    return wordlist_override(terms)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="titlecaps",
        description="Convert text to title case, keeping small words "
                    "(a, of, the, ...) lowercase inside a line.",
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Text to convert. Read from --input-file or stdin when omitted.",
    )

    parser.add_argument(
        "-f", "--input-file",
        default=None,
        help="File to read text from ('-' for stdin).",
    )

    parser.add_argument(
        "-o", "--output-file",
        default=None,
        help="File to write the result to (default: stdout).",
    )

    parser.add_argument(
        "-w", "--wordlist",
        action="append",
        default=None,
        help="File of terms with a fixed spelling, one per line. "
             "Can be specified multiple times.",
    )

    parser.add_argument(
        "--boundary-forcing",
        action=argparse.BooleanOptionalAction,
        default=config.DEFAULT_BOUNDARY_FORCING,
        help="Capitalize small words at the start and end of each line "
             "(default: %(default)s).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every classification decision to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``titlecaps`` and ``python -m titlecaps``.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.wordlist:
        wordlists = args.wordlist
    elif config.DEFAULT_WORDLIST:
        wordlists = [config.DEFAULT_WORDLIST]
    else:
        wordlists = []

    try:
        override = _build_override(wordlists)
        text = _read_input(args)
        result = convert(text, boundary_forcing=args.boundary_forcing, override=override)
    except (OSError, TitlecapsError) as e:
        _error(str(e))
        sys.exit(1)

    if args.output_file:
        with open(args.output_file, "w", encoding="utf-8") as f:
            f.write(result)
        print("Wrote {} line(s) to {}".format(
            len(result.split("\n")), args.output_file,
        ), file=sys.stderr)
    elif args.text:
        print(result)
    else:
        sys.stdout.write(result)


if __name__ == "__main__":
    main()
