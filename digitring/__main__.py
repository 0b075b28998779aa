"""Entry point for the digit ring explorer."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from . import arithmetic, codec
from .config import LOG_LEVEL_ENV_VAR, NumberSettings
from .errors import DigitRingError
from .logging_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="digitring", description="Explore numbers stored as digit rings.")
    action = parser.add_mutually_exclusive_group()
    action.add_argument("--add", nargs=2, metavar=("A", "B"), help="print A + B computed on digit rings")
    action.add_argument("--convert", metavar="A", help="print A in the conversion base")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING"),
        help=f"logging level (default: ${LOG_LEVEL_ENV_VAR} or WARNING)",
    )
    return parser


def run_console(args: argparse.Namespace, settings: NumberSettings) -> int:
    """Handle the one-shot console actions and print their results."""
    try:
        if args.add is not None:
            left, right = (codec.from_decimal(text, settings.base) for text in args.add)
            total = arithmetic.add(left, right)
            print(f"{codec.to_digit_string(total)} (base {total.base}) = {codec.to_decimal(total)}")
        else:
            ring = codec.from_decimal(args.convert, settings.base)
            converted = arithmetic.change_scale(ring, settings)
            print(f"{codec.to_digit_string(converted)} (base {converted.base})")
    except DigitRingError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a console action, or launch the PySide6 window when none is given."""
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.log_level)
        settings = NumberSettings.from_env()
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if args.add is not None or args.convert is not None:
        return run_console(args, settings)

    from PySide6.QtWidgets import QApplication

    from .gui import DigitRingWindow

    app = QApplication(sys.argv)
    window = DigitRingWindow(settings)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
