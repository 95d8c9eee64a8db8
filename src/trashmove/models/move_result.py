# Filename: move_result.py
# Author: Rich Lewis @RichLewis007
# Description: Data structures describing a trash request. Pairs caller-supplied paths with
#              their absolute form and summarises the outcome of a batch move.

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PathEntry:
    # A caller-supplied path string alongside its resolved absolute form.

    raw: str
    absolute: str


@dataclass(slots=True)
class MoveResult:
    # Outcome of a batch move: paths that did not exist and per-item error messages.

    missing: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        # True when nothing was missing and nothing failed.
        return not self.missing and not self.errors


def resolve_entry(raw: str, base_dir: str) -> PathEntry:
    """Resolve ``raw`` against ``base_dir``.

    Absolute input is kept exactly as given. Relative input is joined to
    ``base_dir`` and normalised; a relative ``base_dir`` is anchored at the
    current working directory first.
    """
    if raw.startswith("/"):
        return PathEntry(raw=raw, absolute=raw)
    return PathEntry(raw=raw, absolute=os.path.abspath(os.path.join(base_dir, raw)))


__all__ = ["MoveResult", "PathEntry", "resolve_entry"]
