# Filename: trash.py
# Author: Rich Lewis @RichLewis007
# Description: Utilities for safely moving files to the Trash. Delegates to an external
#              trash command when one works, otherwise relocates items into ~/.Trash with
#              collision-safe names and a copy/remove fallback across devices.

from __future__ import annotations

import errno
import logging
import os
import shutil
import subprocess
import time
from collections.abc import Callable, Sequence
from typing import Protocol

from ..models.move_result import MoveResult, PathEntry, resolve_entry
from .command_resolver import CommandCache, Runner, TrashCommandResolver, run_quietly
from .config import TrashEnvironment

logger = logging.getLogger(__name__)

TRASH_UNAVAILABLE_MESSAGE = "Unable to locate macOS Trash directory (HOME/.Trash)."

Clock = Callable[[], float]


class MoveStrategy(Protocol):
    # A way of trashing a batch. ``None`` hands the batch to the next stage.

    def attempt(self, entries: Sequence[PathEntry], missing: list[str]) -> MoveResult | None: ...


def build_trash_target(trash_dir: str, absolute_path: str, timestamp_ms: int) -> str:
    """Return a path inside ``trash_dir`` that does not exist yet.

    The plain base name is preferred. On collision the timestamp is
    appended, then ``-1``, ``-2`` and so on after it.
    """
    base_name = os.path.basename(os.path.normpath(absolute_path))
    candidate = os.path.join(trash_dir, base_name)
    attempt = 0
    while os.path.lexists(candidate):
        suffix = f"-{timestamp_ms}" if attempt == 0 else f"-{timestamp_ms}-{attempt}"
        candidate = os.path.join(trash_dir, f"{base_name}{suffix}")
        attempt += 1
    return candidate


def _copy_then_remove(source: str, target: str) -> None:
    # Emulate a move across filesystems.
    if os.path.isdir(source) and not os.path.islink(source):
        shutil.copytree(source, target, symlinks=True)
        shutil.rmtree(source)
    else:
        shutil.copy2(source, target, follow_symlinks=False)
        if os.path.lexists(source):
            os.unlink(source)


def _format_error(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


class DelegatedCommandStrategy:
    # Hands the whole batch to an external trash command, if one is installed.

    def __init__(self, resolver: TrashCommandResolver, runner: Runner = run_quietly) -> None:
        self.resolver = resolver
        self._runner = runner

    def attempt(self, entries: Sequence[PathEntry], missing: list[str]) -> MoveResult | None:
        command = self.resolver.resolve()
        if command is None:
            return None
        try:
            status = self._runner([command, *(entry.absolute for entry in entries)])
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("Trash command %s could not run: %s", command, exc)
            return None
        if status != 0:
            logger.debug("Trash command %s exited with %s; moving directly.", command, status)
            return None
        logger.debug("Trash command %s moved %d item(s).", command, len(entries))
        return MoveResult(missing=missing, errors=[])


class DirectMoveStrategy:
    # Renames items into ~/.Trash, copying across devices when rename cannot.

    def __init__(self, environment: TrashEnvironment, clock: Clock = time.time) -> None:
        self.environment = environment
        self._clock = clock

    def attempt(self, entries: Sequence[PathEntry], missing: list[str]) -> MoveResult:
        trash_dir = self.environment.trash_dir()
        if trash_dir is None:
            logger.warning(TRASH_UNAVAILABLE_MESSAGE)
            return MoveResult(missing=missing, errors=[TRASH_UNAVAILABLE_MESSAGE])

        timestamp_ms = int(self._clock() * 1000)
        errors: list[str] = []
        for entry in entries:
            try:
                self._move_one(entry, trash_dir, timestamp_ms)
            except OSError as exc:
                logger.warning("Failed to move %s to Trash: %s", entry.absolute, exc)
                errors.append(f"Failed to move {entry.raw} to Trash: {_format_error(exc)}")
        return MoveResult(missing=missing, errors=errors)

    def _move_one(self, entry: PathEntry, trash_dir: str, timestamp_ms: int) -> None:
        target = build_trash_target(trash_dir, entry.absolute, timestamp_ms)
        logger.debug("Moving %s -> %s", entry.absolute, target)
        try:
            os.rename(entry.absolute, target)
        except OSError as exc:
            if exc.errno != errno.EXDEV:
                raise
            logger.debug("Cross-device move for %s; copying instead.", entry.absolute)
            _copy_then_remove(entry.absolute, target)


class TrashRelocator:
    """Moves batches of paths into the Trash.

    Paths are classified first; only existing ones reach the strategy
    chain. The external command is tried once for the whole batch, and a
    direct move into ``~/.Trash`` handles everything it does not.
    """

    def __init__(
        self,
        resolver: TrashCommandResolver,
        environment: TrashEnvironment,
        *,
        clock: Clock = time.time,
        runner: Runner = run_quietly,
    ) -> None:
        self.delegated: MoveStrategy = DelegatedCommandStrategy(resolver, runner)
        self.direct = DirectMoveStrategy(environment, clock)

    def move_paths_to_trash(
        self,
        paths: Sequence[str],
        base_dir: str,
        *,
        allow_missing: bool = False,
    ) -> MoveResult:
        missing: list[str] = []
        existing: list[PathEntry] = []
        for raw in paths:
            entry = resolve_entry(raw, base_dir)
            if not os.path.exists(entry.absolute):
                if not allow_missing:
                    missing.append(raw)
                continue
            existing.append(entry)

        if not existing:
            return MoveResult(missing=missing, errors=[])

        result = self.delegated.attempt(existing, missing)
        if result is None:
            result = self.direct.attempt(existing, missing)
        return result


_command_cache = CommandCache()


def default_relocator() -> TrashRelocator:
    # Compose a relocator from the live environment and the process-wide command cache.
    environment = TrashEnvironment.from_environ()
    return TrashRelocator(TrashCommandResolver(environment, _command_cache), environment)


def move_paths_to_trash(
    paths: Sequence[str],
    base_dir: str,
    *,
    allow_missing: bool = False,
) -> MoveResult:
    # Move ``paths`` (relative ones resolved against ``base_dir``) to the Trash.
    return default_relocator().move_paths_to_trash(paths, base_dir, allow_missing=allow_missing)


def reset_command_cache() -> None:
    # Forget the resolved trash command so the next call probes again.
    _command_cache.reset()


__all__ = [
    "DelegatedCommandStrategy",
    "DirectMoveStrategy",
    "MoveStrategy",
    "TRASH_UNAVAILABLE_MESSAGE",
    "TrashRelocator",
    "build_trash_target",
    "default_relocator",
    "move_paths_to_trash",
    "reset_command_cache",
]
