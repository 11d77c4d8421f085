"""Logging setup shared by the CLI and the TUI."""

import logging
import os
import sys

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "NONE": logging.CRITICAL + 1,
}


def setup_logging(verbose: bool = False, handler: logging.Handler | None = None) -> None:
    """Configure the root logger.

    Records go to stderr unless another handler is given, so stdout only
    carries results. ``--verbose`` wins over ``MOVIES_LOG_LEVEL``, which
    defaults to WARN.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get("MOVIES_LOG_LEVEL", "WARN").upper()
        level = LEVELS.get(level_name, logging.WARNING)

    handler = handler or logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[movies] %(levelname)s: %(message)s"))
    logging.basicConfig(level=level, handlers=[handler], force=True)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
