"""Session registry of approved files referenced by tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from diffgate.application.audit.stale_approvals import normalize_path

if TYPE_CHECKING:
    from collections.abc import Iterator


class ApprovedFileRegistry:
    """Approved file paths the current run touched.

    Paths are stored normalized, in first-seen order, without duplicates.
    """

    def __init__(self) -> None:
        self._paths: dict[str, None] = {}

    def add(self, path: str | os.PathLike[str]) -> str:
        """Record an approved file. Returns the normalized path."""
        normalized = normalize_path(os.fspath(path))
        if not normalized:
            raise ValueError("approved file path must not be empty")
        self._paths[normalized] = None
        return normalized

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(self._paths)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return normalize_path(os.fspath(path)) in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self._paths)
