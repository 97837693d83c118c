"""Command-line front door for manpane.

Parses CLI options, merges them over persisted preferences, and
configures logging. Then dispatches into the session runtime.
"""

from __future__ import annotations

import argparse
import logging

from .errors import ManpaneError
from .runtime import run_session
from .runtime.config import load_viewer_config, save_theme_name
from .runtime.loop import ViewerLayout
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="manpane",
        description="Browse man pages by option and section in a three-pane terminal viewer.",
    )
    parser.add_argument(
        "keyword",
        nargs="?",
        default="",
        help='Manual to open, optionally led by a section number ("1 curl"). Prompts when omitted.',
    )
    parser.add_argument("-s", "--section", default=None, help="Manual section; opens KEYWORD directly.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}). Remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--nopager",
        action="store_true",
        help="Print an outline of options and headings instead of opening the viewer.",
    )
    parser.add_argument(
        "--man-width",
        type=_positive_int,
        default=None,
        help="Column width man formats the page to (default: 80 or the configured value).",
    )
    parser.add_argument("--log-file", default=None, help="Write log records to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    return parser


def configure_logging(log_file: str | None, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    if log_file:
        logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and open the requested manual page.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used.
    Source and lookup failures exit with their message.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    config = load_viewer_config()
    if args.theme is not None:
        save_theme_name(args.theme)
    theme_name = args.theme if args.theme is not None else config.theme
    man_width = args.man_width if args.man_width is not None else config.man_width

    try:
        run_session(
            args.keyword,
            args.section,
            theme_name=theme_name,
            no_color=args.no_color,
            nopager=args.nopager,
            man_width=man_width,
            layout=ViewerLayout(sidebar_width=config.sidebar_width, sections_width=config.sections_width),
        )
    except ManpaneError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
