"""Filesystem primitives used by reporters.

Stateless helpers. FAIL-FIRST on contract violations.
"""

from __future__ import annotations

from pathlib import Path

from diffgate.domain.exceptions import ApprovalFileNotFoundError


def file_exists(path: str | None) -> bool:
    """Check path exists. None or empty path never exists."""
    if not path:
        return False
    return Path(path).exists()


def assert_file_exists(path: str) -> None:
    """Raise if path does not exist.

    Raises:
        ApprovalFileNotFoundError: Path missing.
    """
    if not file_exists(path):
        raise ApprovalFileNotFoundError(path)


def create_empty_file_if_not_exists(path: str) -> bool:
    """Create an empty file at path unless one already exists.

    Parent directories are created as needed.

    Returns:
        True if a file was created.
    """
    target = Path(path)
    if target.exists():
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    target.touch()
    return True
