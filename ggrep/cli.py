#!/usr/bin/env python3
"""
ggrep - recursive grep without shell globs

Usage:
  ggrep foo                      # Search ./ for "foo"
  ggrep foo src                  # Search src/
  ggrep -i -w foo                # Case-insensitive, whole words only
  ggrep -F 'a.b*c'               # Literal text, no regex
  ggrep -v foo                   # Lines NOT matching
  ggrep -c foo                   # Count per file
  ggrep -l foo                   # Only file names
  ggrep foo --color always | less -R

Searches files with extensions cpp, h, txt, html, php, c, css, json, py, js
up to 7 directories deep.

Exit status: 0 if something matched, 1 if nothing matched,
2 for an invalid pattern, 64 for bad usage.
"""

import argparse
import logging
import sys
from datetime import datetime, timezone

from . import __version__
from .container import Container
from .core import ColorMode, PatternError, RunOutcome, SearchOptions
from .formatters import display_path, render, should_colorize

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_BAD_PATTERN = 2
EXIT_USAGE = 64
EXIT_INTERRUPTED = 130

logger = logging.getLogger(__name__)


class MillisecondFormatter(logging.Formatter):
    """Custom formatter with milliseconds as :XXXX format"""
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Override formatTime to include milliseconds with : separator"""
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            s = ct.strftime("%Y/%m/%d %H:%M:%S")
            ms = int((record.created % 1) * 10000)
            return f"{s}:{ms:04d}"
        return super().formatTime(record, datefmt)


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr; quiet unless --debug"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
        stream=sys.stderr
    )

    for handler in logging.root.handlers:
        handler.setFormatter(MillisecondFormatter(
            "[%(asctime)s] [%(levelname)s] %(message)s",
            datefmt="%Y/%m/%d %H:%M:%S"
        ))


class ArgumentParser(argparse.ArgumentParser):
    """argparse with a usage-error exit status distinct from 2"""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="ggrep",
        description="Recursive grep without shell globs"
    )
    parser.add_argument("keyword", help="Pattern to search for (regex or literal)")
    parser.add_argument(
        "prefix",
        nargs="?",
        default=".",
        help="Directory to start searching (default: .)"
    )
    parser.add_argument("-i", "--ignore-case", action="store_true", help="Case-insensitive match")
    parser.add_argument("-v", "--invert-match", action="store_true", help="Select non-matching lines")
    parser.add_argument("-c", "--count", action="store_true", help="Count matching lines per file")
    parser.add_argument("-l", "--list-files", action="store_true", help="List only names of files with matches")
    parser.add_argument("-F", "--fixed-strings", action="store_true", help="Treat keyword as literal text, not a regex")
    parser.add_argument("-w", "--word-regexp", action="store_true", help="Match whole words only")
    parser.add_argument(
        "--color",
        choices=[mode.value for mode in ColorMode],
        default=ColorMode.AUTO.value,
        help="Highlight matches: auto, always, or never (default: auto)"
    )
    parser.add_argument("--debug", action="store_true", help="Log debug details to stderr")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> SearchOptions:
    return SearchOptions(
        keyword=args.keyword,
        prefix=args.prefix,
        ignore_case=args.ignore_case,
        invert_match=args.invert_match,
        count=args.count,
        list_files=args.list_files,
        fixed_strings=args.fixed_strings,
        word_regexp=args.word_regexp,
        color=ColorMode(args.color)
    )


def search_command(options: SearchOptions, container: Container | None = None) -> int:
    """Run one search, print results, return the exit status"""
    container = container or Container()
    service = container.search

    try:
        matcher = service.compile(options)
    except PatternError as e:
        logger.debug("pattern compile failed: %s", e.reason)
        print(e, file=sys.stderr)
        return EXIT_BAD_PATTERN

    colorize = should_colorize(options.color, sys.stdout)
    mode = options.output_mode
    logger.debug("searching %s for %r (mode=%s, colorize=%s)", options.prefix, matcher.pattern, mode.value, colorize)

    outcome = RunOutcome()
    for result in service.execute(options, matcher):
        if result.failed:
            print(f"Error reading {display_path(result.path)}: {result.error}", file=sys.stderr)
        else:
            for line in render(mode, result, matcher, colorize):
                print(line)
        outcome.record(result)

    logger.debug(
        "done: files_scanned=%d files_failed=%d lines_reported=%d any_match=%s",
        outcome.files_scanned,
        outcome.files_failed,
        outcome.lines_reported,
        outcome.any_match
    )
    return EXIT_MATCH if outcome.any_match else EXIT_NO_MATCH


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.debug)
    logger.debug("options: %s", vars(args))

    try:
        return search_command(options_from_args(args))
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
