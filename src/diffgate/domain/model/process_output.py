"""ProcessOutput: fully buffered output of a reporter process."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProcessOutput:
    """Captured output of one reporter launch.

    Attributes:
        stdout: Decoded standard output (may be empty).
        stderr: Decoded standard error (may be empty). Also carries the
            error text when the process could not be started.
        returncode: Exit code. None if the process never started.
    """

    stdout: str = ""
    stderr: str = ""
    returncode: int | None = None

    @property
    def is_empty(self) -> bool:
        """True when neither stream produced text."""
        return not self.stdout and not self.stderr

    def streams(self) -> tuple[tuple[str, str], ...]:
        """Non-empty streams as (label, text) pairs, stdout first."""
        pairs = (("stdout", self.stdout), ("stderr", self.stderr))
        return tuple((label, text) for label, text in pairs if text)
