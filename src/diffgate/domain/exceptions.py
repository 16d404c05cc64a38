"""Domain exceptions: all public errors of diffgate.

Contract violations (missing reporter name, missing input file) and
consistency violations (stale approved files) are raised immediately.
A failing child process is never an exception: its stderr is reported instead.
"""

from __future__ import annotations

from collections.abc import Iterable


class DiffGateError(Exception):
    """Base for all diffgate error exceptions.

    Allows: except DiffGateError to catch all library errors.
    """


class MissingReporterNameError(DiffGateError, ValueError):
    """Reporter constructed without a name.

    Inherits ValueError for semantic correctness (invalid argument).
    """

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("Argument name missing")


class ApprovalFileNotFoundError(DiffGateError, FileNotFoundError):
    """File passed to a reporter does not exist.

    Caller contract violation, not a recoverable condition.

    Attributes:
        path: Path that was expected to exist.
    """

    def __init__(self, path: str) -> None:
        """Initialize with missing path."""
        self.path = path
        super().__init__(f"file not found: {path}")


class StaleApprovedFilesError(DiffGateError):
    """Approved files on disk that no test in the run referenced.

    Attributes:
        stale_paths: Normalized paths of every stale file (at least one).
    """

    BANNER = "ERROR: Found stale approvals files: \n"

    def __init__(self, stale_paths: Iterable[str]) -> None:
        """Initialize with stale paths.

        Raises:
            ValueError: If stale_paths is empty.
        """
        paths = tuple(stale_paths)
        if not paths:
            raise ValueError("StaleApprovedFilesError requires at least one stale path")

        self.stale_paths = paths
        super().__init__(self.BANNER + "".join(f"  - {p}\n" for p in paths))
