"""Configuration of the stale approved files audit.

None = no ignore predicate, every discovered file is checked.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_APPROVED_FILE_PATTERN = "*.approved.*"


@dataclass(frozen=True, slots=True)
class AuditConfig:
    """Stale approval audit configuration DTO.

    Attributes:
        error_on_stale_approved_files: Enables the audit. False = no-op.
        should_ignore_stale_approved_file: Predicate on a normalized path.
            True exempts the file from the staleness check.
        approved_file_pattern: Glob for baseline file names.
    """

    error_on_stale_approved_files: bool = False
    should_ignore_stale_approved_file: Callable[[str], bool] | None = None
    approved_file_pattern: str = DEFAULT_APPROVED_FILE_PATTERN

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.approved_file_pattern:
            raise ValueError("approved_file_pattern must not be empty")
        if self.should_ignore_stale_approved_file is not None and not callable(
            self.should_ignore_stale_approved_file
        ):
            raise TypeError("should_ignore_stale_approved_file must be callable")

    def is_ignored(self, path: str) -> bool:
        """Check if path is exempt from the staleness check."""
        if self.should_ignore_stale_approved_file is None:
            return False
        return bool(self.should_ignore_stale_approved_file(path))
