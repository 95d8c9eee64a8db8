# Filename: cli.py
# Author: Rich Lewis @RichLewis007
# Description: Command-line interface for Trash Move. Sends the given paths to the Trash
#              and reports missing paths and failures on stderr.

from __future__ import annotations

import argparse
import os
import sys

from .services import logger as logger_service
from .services.trash import move_paths_to_trash


def build_parser() -> argparse.ArgumentParser:
    # Create and configure the command-line argument parser.
    parser = argparse.ArgumentParser(
        prog="trash-move",
        description="Move files and folders to the Trash instead of deleting them.",
    )
    parser.add_argument("paths", nargs="+", help="Files or folders to move to the Trash.")
    parser.add_argument(
        "--base-dir",
        default=os.getcwd(),
        help="Directory that relative paths are resolved against (default: current directory).",
    )
    parser.add_argument(
        "--allow-missing",
        action="store_true",
        help="Silently skip paths that do not exist.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set console log level.",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Log to the console only.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    # Entry point for the trash-move command.
    parser = build_parser()
    args = parser.parse_args(argv)
    logger_service.configure(log_level=args.log_level, log_to_file=not args.no_log_file)

    result = move_paths_to_trash(args.paths, args.base_dir, allow_missing=args.allow_missing)

    for path in result.missing:
        print(f"Missing: {path}", file=sys.stderr)
    for message in result.errors:
        print(message, file=sys.stderr)
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
