"""LaunchHandle: completion state of one reporter launch."""

from __future__ import annotations

import threading

from diffgate.domain.model.process_output import ProcessOutput


class LaunchHandle:
    """Completion handle for a launched reporter process.

    Blocking launches return an already completed handle.
    Background launches complete after the consolidated output was emitted.
    """

    __slots__ = ("_done", "_output")

    def __init__(self) -> None:
        self._done = threading.Event()
        self._output: ProcessOutput | None = None

    @classmethod
    def completed(cls, output: ProcessOutput) -> LaunchHandle:
        """Create handle that is already done."""
        handle = cls()
        handle.complete(output)
        return handle

    @property
    def done(self) -> bool:
        """Whether the process finished and its output was reported."""
        return self._done.is_set()

    @property
    def output(self) -> ProcessOutput | None:
        """Captured output, None until done."""
        return self._output

    def complete(self, output: ProcessOutput) -> None:
        """Mark handle done with captured output. Called exactly once."""
        if self._done.is_set():
            raise RuntimeError("LaunchHandle already completed")
        self._output = output
        self._done.set()

    def wait(self, timeout: float | None = None) -> ProcessOutput | None:
        """Block until done or timeout.

        Returns:
            Captured output, or None if timeout expired first.
        """
        if not self._done.wait(timeout):
            return None
        return self._output
