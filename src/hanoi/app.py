"""Application entry point."""

from __future__ import annotations

import argparse
import sys

from hanoi import __version__
from hanoi.ui.settings import AppSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanoi",
        description="The Towers of Hanoi in your terminal. Move disks with two "
        "keystrokes: the peg to take from, then the peg to put on (l, m, r).",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Draw disks with glyphs instead of colour",
    )
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level for --log-file (default: WARNING)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def parse_settings(argv: list[str] | None = None) -> AppSettings:
    args = build_parser().parse_args(argv)
    return AppSettings(
        use_color=not args.no_color,
        log_file=args.log_file,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the game."""
    from hanoi.ui.bootstrap import run_application

    sys.exit(run_application(parse_settings(argv)))


if __name__ == "__main__":
    main()
