"""Logging setup shared by the CLI and GUI entry points."""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV_VAR = "DICTIONARY_LOG_LEVEL"


def configure_logging(verbose: bool = False) -> None:
    """Configure console logging for the application.

    The level is WARNING by default, DEBUG when verbose is set, and can be
    overridden with the DICTIONARY_LOG_LEVEL environment variable.

    Args:
        verbose: Log debug messages (request tracing, decode counts)
    """
    level = logging.DEBUG if verbose else logging.WARNING

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").upper()
    if env_level and isinstance(logging.getLevelName(env_level), int):
        level = logging.getLevelName(env_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates when called twice
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # urllib3 logs every connection at DEBUG, including the full URL with the key
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))
