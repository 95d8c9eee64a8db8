# Filename: logger.py
# Author: Rich Lewis @RichLewis007
# Description: Logging configuration utilities. Sets up rotating file and console handlers
#              for the trash-move command with configurable log levels.

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from .config import ensure_app_dirs

LOG_FILENAME = "trash-move.log"


def _get_log_path() -> Path:
    # Return the path to the rotating log file, creating folders as needed.
    return ensure_app_dirs() / LOG_FILENAME


def configure(*, log_level: str = "WARNING", log_to_file: bool = True) -> None:
    # Configure root logger with rotating file and console handlers.
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []
    if log_to_file:
        file_handler = logging.handlers.RotatingFileHandler(
            _get_log_path(),
            maxBytes=2 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
    handlers.append(console_handler)

    # Avoid duplicate handlers when reconfiguring.
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
