"""Logging helpers for phrasal."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGING_INITIALIZED = False

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbosity: str = "info", log_file: Path | None = None) -> None:
    """Configure global logging with a stderr console and optional file handler.

    Stdout is reserved for the JSON result, so console records go to stderr.

    Args:
        verbosity: Logging verbosity for the console (quiet, info, verbose, debug).
        log_file: Optional path for a debug-level log file.
    """
    global _LOGGING_INITIALIZED

    verbosity = verbosity.lower()
    level_map = {
        "quiet": logging.WARNING,
        "info": logging.INFO,
        "verbose": logging.DEBUG,
        "debug": logging.DEBUG,
    }
    console_level = level_map.get(verbosity, logging.INFO)

    root = logging.getLogger()
    if not _LOGGING_INITIALIZED:
        root.setLevel(logging.DEBUG)
        root.handlers.clear()
        root.addHandler(_build_console_handler(console_level))
        if log_file:
            root.addHandler(_build_file_handler(log_file))
        _LOGGING_INITIALIZED = True
    else:
        # sys.stderr may have been swapped since the first call; rebind.
        for handler in list(root.handlers):
            if _is_console_handler(handler):
                root.removeHandler(handler)
        root.addHandler(_build_console_handler(console_level))
        if log_file and not any(
            isinstance(h, logging.FileHandler) for h in root.handlers
        ):
            root.addHandler(_build_file_handler(log_file))

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _is_console_handler(handler: logging.Handler) -> bool:
    return type(handler) is logging.StreamHandler


def _build_console_handler(level: int) -> logging.StreamHandler:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(_FORMAT))
    return console_handler


def _build_file_handler(log_file: Path) -> logging.FileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_FORMAT))
    return file_handler
