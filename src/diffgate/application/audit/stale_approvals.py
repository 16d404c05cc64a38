"""Stale approved files audit.

Directories are the unit of search, not individual files: an approved file
whose name matches no expected file (renamed or deleted test) is only found
by listing its directory.

Algorithm:
  1. Normalize expected paths (\\ → /).
  2. Distinct parent directories of expected paths.
  3. Recursive discovery of approved files beneath each directory (deduped).
  4. Normalize discovered paths.
  5. Drop paths the ignore predicate exempts.
  6. Stale = discovered - expected. Non-empty → StaleApprovedFilesError.
"""

from __future__ import annotations

import logging
import posixpath
from typing import TYPE_CHECKING

from diffgate.domain.exceptions import StaleApprovedFilesError
from diffgate.infrastructure.discovery import glob_approved_files

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from diffgate.domain.model.audit_config import AuditConfig

logger = logging.getLogger(__name__)


def normalize_path(path: str | None) -> str:
    """Convert path separators to "/". Idempotent. None gives ""."""
    return (path or "").replace("\\", "/")


def approved_directories(expected: Iterable[str]) -> tuple[str, ...]:
    """Distinct parent directories of normalized paths, first-seen order."""
    return tuple(dict.fromkeys(posixpath.dirname(normalize_path(p)) for p in expected))


def find_stale_approved_files(
    expected: Iterable[str],
    config: AuditConfig,
    *,
    list_files: Callable[[str, str], Iterable[str]] = glob_approved_files,
) -> tuple[str, ...]:
    """Compute approved files on disk the run did not reference.

    Args:
        expected: Approved file paths the run knows about.
        config: Audit configuration (pattern, ignore predicate).
        list_files: Directory listing primitive (directory, pattern) → paths.

    Returns:
        Sorted normalized stale paths. Empty if none.
    """
    normalized_expected = frozenset(normalize_path(p) for p in expected)

    discovered: set[str] = set()
    for directory in approved_directories(normalized_expected):
        discovered.update(
            normalize_path(p) for p in list_files(directory, config.approved_file_pattern)
        )

    return tuple(
        sorted(
            path
            for path in discovered
            if not config.is_ignored(path) and path not in normalized_expected
        )
    )


def audit_stale_approved_files(
    expected: Iterable[str],
    config: AuditConfig,
    *,
    list_files: Callable[[str, str], Iterable[str]] = glob_approved_files,
) -> None:
    """Fail if stale approved files exist. No-op unless enabled in config.

    Raises:
        StaleApprovedFilesError: At least one stale approved file found.
    """
    if not config.error_on_stale_approved_files:
        return

    stale = find_stale_approved_files(expected, config, list_files=list_files)
    if stale:
        logger.warning("found %d stale approved file(s)", len(stale))
        raise StaleApprovedFilesError(stale)
