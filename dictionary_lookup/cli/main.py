"""Main CLI entry point for dictionary_lookup."""

import argparse
import sys

from dictionary_lookup import __version__
from dictionary_lookup.cli.commands import define
from dictionary_lookup.utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="dictionary-lookup",
        description="Look up English words in the Merriam-Webster Collegiate Dictionary",
        epilog="Set DICTIONARY_API_KEY to your dictionaryapi.com key before running",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log request and decode details to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # dictionary-lookup define <word>
    define_parser = subparsers.add_parser(
        "define",
        help="Look up a word and print its definitions",
        description="Fetch definitions for a word, or spelling suggestions if it is not found",
    )
    define_parser.add_argument("word", nargs="+", help="Word or phrase to look up")
    define_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Network timeout in seconds (default: 10)",
    )

    # dictionary-lookup gui
    subparsers.add_parser(
        "gui",
        help="Open the dictionary window",
        description="Launch the graphical dictionary",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    # Dispatch to appropriate command
    if args.command == "define":
        return define.define_command(args)
    elif args.command == "gui":
        from dictionary_lookup.gui.app import main as gui_main

        return gui_main()
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
