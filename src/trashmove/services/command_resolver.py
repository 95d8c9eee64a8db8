# Filename: command_resolver.py
# Author: Rich Lewis @RichLewis007
# Description: Discovery of an external trash command (trash-put / trash). Probes candidate
#              executables once per process and caches the outcome for later callers.

from __future__ import annotations

import logging
import os
import subprocess
import threading
from collections.abc import Callable, Sequence
from typing import Final

from .config import CANDIDATE_COMMANDS, PROBE_FLAG, TrashEnvironment

logger = logging.getLogger(__name__)

# Exit statuses that prove the binary ran: 0 for help output, 1 for a usage complaint.
_ACCEPTED_PROBE_STATUSES: Final[frozenset[int]] = frozenset({0, 1})

_UNSET: Final = object()

Runner = Callable[[Sequence[str]], int]


def run_quietly(argv: Sequence[str]) -> int:
    # Run ``argv`` with all standard streams discarded and return its exit status.
    completed = subprocess.run(
        list(argv),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        check=False,
    )
    return completed.returncode


class CommandCache:
    """Holds the resolved trash command for the lifetime of its owner.

    ``None`` is a legitimate cached value meaning no usable command was
    found. The factory passed to :meth:`get_or_compute` runs at most once
    until :meth:`reset` is called, even when first callers race.
    """

    def __init__(self) -> None:
        self._value: object = _UNSET
        self._lock = threading.Lock()

    @property
    def is_resolved(self) -> bool:
        return self._value is not _UNSET

    def get_or_compute(self, factory: Callable[[], str | None]) -> str | None:
        if self._value is _UNSET:
            with self._lock:
                if self._value is _UNSET:
                    self._value = factory()
        else:
            logger.debug("Trash command cache hit: %s", self._value)
        return self._value  # type: ignore[return-value]

    def reset(self) -> None:
        with self._lock:
            self._value = _UNSET


class TrashCommandResolver:
    # Finds the first invocable trash command among PATH and Homebrew locations.

    def __init__(
        self,
        environment: TrashEnvironment,
        cache: CommandCache,
        *,
        runner: Runner = run_quietly,
        names: Sequence[str] = CANDIDATE_COMMANDS,
    ) -> None:
        self.environment = environment
        self.cache = cache
        self._runner = runner
        self._names = tuple(names)

    def resolve(self) -> str | None:
        # Return the cached command, probing candidates on first use.
        return self.cache.get_or_compute(self._search)

    def candidates(self) -> list[str]:
        # Bare names first, then each name joined with every search directory.
        search_dirs = self.environment.search_dirs()
        ordered: dict[str, None] = {}
        for name in self._names:
            ordered.setdefault(name, None)
            for directory in search_dirs:
                ordered.setdefault(os.path.join(directory, name), None)
        return list(ordered)

    def _search(self) -> str | None:
        for candidate in self.candidates():
            if self._probe(candidate):
                logger.debug("Using trash command: %s", candidate)
                return candidate
        logger.debug("No trash command found; falling back to direct moves.")
        return None

    def _probe(self, candidate: str) -> bool:
        try:
            status = self._runner([candidate, PROBE_FLAG])
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("Probe failed for %s: %s", candidate, exc)
            return False
        logger.debug("Probe %s exited with %s", candidate, status)
        return status in _ACCEPTED_PROBE_STATUSES


__all__ = ["CommandCache", "Runner", "TrashCommandResolver", "run_quietly"]
