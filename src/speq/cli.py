"""Command-line entry point: parse arguments, load the document, browse it."""

from __future__ import annotations

import argparse
import logging
import sys

from speq import __version__
from speq.app import App
from speq.config import ViewerConfig
from speq.errors import SpeqError
from speq.log import setup_logging
from speq.parser import load_spec
from speq.terminal import run

__all__ = ["create_parser", "main"]

logger = logging.getLogger(__name__)

_DEFAULTS = ViewerConfig()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speq",
        description=(
            "Browse the schemas of an OpenAPI or Swagger document in the terminal."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        help="Get version",
        action="version",
        version=__version__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        help="Enable verbose (debug) logging",
        action="store_true",
    )
    parser.add_argument(
        "--log-file",
        help="Write log records to this file instead of stderr.",
        default=None,
    )
    parser.add_argument(
        "--scroll-step",
        help="Lines the detail pane scrolls per ^d/^u.",
        type=int,
        default=_DEFAULTS.scroll_step,
    )
    parser.add_argument(
        "--poll-interval",
        help="Milliseconds to wait for a key before redrawing.",
        type=int,
        default=_DEFAULTS.poll_interval_ms,
    )
    parser.add_argument("spec", help="Path to the API document (YAML or JSON).")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.verbose, args.log_file)
    except OSError as exc:
        parser.error(f"cannot open log file: {exc}")

    try:
        config = ViewerConfig(
            poll_interval_ms=args.poll_interval, scroll_step=args.scroll_step
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        spec = load_spec(args.spec)
    except SpeqError as exc:
        logger.error("%s", exc)
        return 1

    run(App.from_spec(spec, config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
