"""
Copyright (c) 2025 Jakob Bolliger

This file is part of leftpad.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the LICENSE file in the
root directory of this source tree.

leftpad - Main entry point for padding values from the command line.
"""
import argparse
import sys

from leftpad.config import DEFAULT_COLS, DEFAULT_FILL
from leftpad.core.commands import CommandManager
from leftpad.core.exceptions import (ConfigurationError, InvalidArgumentError,
                                     LeftpadError)
from leftpad.core.padder import leftpad, to_text
from leftpad.core.session import PadSession
from leftpad.interfaces import CliInterface
from leftpad.ui.resources import Emojis, format_error_message
from leftpad.ui.terminal.text_utils import get_result_in_box
from leftpad.utils.logging_config import get_logger, setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="leftpad",
        description="Pad a value on the left to a minimum width"
    )
    parser.add_argument("value", nargs='?', default=None,
                        help="Value to pad (omit to start an interactive session)")
    parser.add_argument("cols", nargs='?', type=int, default=None,
                        help=f"Minimum width of the result (interactive default: {DEFAULT_COLS})")
    parser.add_argument("-f", "--fill", default=DEFAULT_FILL,
                        help="Fill unit prepended to the value (default: a space)")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="Start an interactive session using the given width and fill as defaults, padding VALUE first if given")
    parser.add_argument("--show-fill", action="store_true",
                        help="Draw the result in a box with the padding made visible")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose logging for debugging")
    return parser


def render_result(result: str, value, cols: int, show_fill: bool) -> str:
    """Return the text to print for a padded value."""
    if show_fill:
        return get_result_in_box(result, to_text(value), cols)
    return result


def main(argv=None):
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.value is not None and args.cols is None and not args.interactive:
        parser.error("a width is required when a value is given")

    setup_logging(args.verbose)
    logger = get_logger(__name__)

    try:
        if args.value is not None and not args.interactive:
            logger.info(f"Padding {args.value!r} to width {args.cols} with {args.fill!r}")
            result = leftpad(args.value, args.cols, args.fill)
            print(render_result(result, args.value, args.cols, args.show_fill))
            return

        session = PadSession(
            DEFAULT_COLS if args.cols is None else args.cols,
            args.fill
        )
        # A value given with -i is padded once with the session defaults
        if args.value is not None:
            result = session.pad(args.value)
            print(render_result(result, args.value, session.cols, args.show_fill))

        cli = CliInterface(session, CommandManager(), show_fill=args.show_fill)
        cli.interactive_session()
    except InvalidArgumentError as e:
        logger.error(f"Invalid argument: {e}")
        print(format_error_message(f"Invalid argument: {e}"), file=sys.stderr)
        sys.exit(1)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        print(format_error_message(f"Invalid configuration: {e}"), file=sys.stderr)
        sys.exit(1)
    except LeftpadError as e:
        logger.error(f"leftpad error: {e}", exc_info=True)
        print(format_error_message(str(e)), file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print(f"\n\n{Emojis.BYE} Session terminated by user. Goodbye!")
        sys.exit(0)


if __name__ == "__main__":
    main()
