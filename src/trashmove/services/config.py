# Filename: config.py
# Author: Rich Lewis @RichLewis007
# Description: Configuration helpers derived from the process environment. Locates the
#              user's Trash directory, the executable search path, and Homebrew prefixes.

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from platformdirs import PlatformDirs

APP_NAME = "TrashMove"
ORG_NAME = "Rich Lewis"

TRASH_DIR_NAME: Final[str] = ".Trash"
CANDIDATE_COMMANDS: Final[tuple[str, ...]] = ("trash-put", "trash")
PROBE_FLAG: Final[str] = "--help"

_DEFAULT_HOMEBREW_PREFIX: Final[str] = "/opt/homebrew"
_LEGACY_TRASH_BIN: Final[str] = "/usr/local/opt/trash/bin"


def ensure_app_dirs() -> Path:
    # Ensure the log directory exists and return its path.
    dirs = PlatformDirs(appname=APP_NAME, appauthor=ORG_NAME)
    log_path = Path(dirs.user_log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    return log_path


@dataclass(frozen=True, slots=True)
class TrashEnvironment:
    # Snapshot of the environment variables that drive trash discovery.

    home: str | None
    search_path: str | None
    homebrew_prefix: str = _DEFAULT_HOMEBREW_PREFIX

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> TrashEnvironment:
        # Build a snapshot from ``environ`` (defaults to ``os.environ``).
        env = os.environ if environ is None else environ
        return cls(
            home=env.get("HOME") or None,
            search_path=env.get("PATH"),
            homebrew_prefix=env.get("HOMEBREW_PREFIX", _DEFAULT_HOMEBREW_PREFIX),
        )

    def search_dirs(self) -> list[str]:
        # Return PATH entries followed by the Homebrew install locations, deduplicated.
        dirs: dict[str, None] = {}
        if self.search_path:
            for segment in self.search_path.split(os.pathsep):
                if segment:
                    dirs.setdefault(segment, None)
        dirs.setdefault(os.path.join(self.homebrew_prefix, "opt", "trash", "bin"), None)
        dirs.setdefault(_LEGACY_TRASH_BIN, None)
        return list(dirs)

    def trash_dir(self) -> str | None:
        # Return ``$HOME/.Trash`` when it already exists; never create it.
        if not self.home:
            return None
        trash = os.path.join(self.home, TRASH_DIR_NAME)
        if not os.path.exists(trash):
            return None
        return trash


__all__ = [
    "APP_NAME",
    "CANDIDATE_COMMANDS",
    "ORG_NAME",
    "PROBE_FLAG",
    "TRASH_DIR_NAME",
    "TrashEnvironment",
    "ensure_app_dirs",
]
