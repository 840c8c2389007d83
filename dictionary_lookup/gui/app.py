"""Main GUI application entry point."""

import argparse
import sys

from PyQt6.QtWidgets import QApplication

from dictionary_lookup.config import load_config_from_env
from dictionary_lookup.gui.main_window import MainWindow
from dictionary_lookup.utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the GUI launcher."""
    parser = argparse.ArgumentParser(
        prog="dictionary-lookup-gui",
        description="Open the Merriam-Webster dictionary window",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log request and decode details to stderr",
    )
    return parser


def main() -> int:
    """Launch the Dictionary Lookup GUI application."""
    # Create application
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Dictionary")
    app.setOrganizationName("DictionaryLookup")

    # API key is read once, here
    config = load_config_from_env()

    # Create main window
    window = MainWindow(config)
    window.show()

    # Run event loop
    return app.exec()


def run(argv: list[str] | None = None) -> None:
    """Console entry point: configure logging, then run the GUI."""
    # Qt consumes its own options (-style, -platform) from sys.argv
    args, _qt_args = build_parser().parse_known_args(argv)
    configure_logging(args.verbose)
    sys.exit(main())


if __name__ == "__main__":
    run()
