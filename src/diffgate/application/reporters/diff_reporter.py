"""DiffReporter: gate in front of an external diff program.

Decides whether the program can run at all (executable present), whether it
can show a given file (text vs binary), and dispatches a blocking or
background launch. Non-blocking launches pass through the rate limiter first.

Availability is probed once per instance and never re-checked, even if the
filesystem changes later.
"""

from __future__ import annotations

import logging
import shutil
import sys
import threading
from typing import TYPE_CHECKING, TextIO

from diffgate.application.reporters.limiter import NeverSuppress
from diffgate.application.reporters.plain_text import PlainTextFormatter
from diffgate.domain.exceptions import MissingReporterNameError
from diffgate.domain.model.availability import Availability
from diffgate.infrastructure.binary import is_binary_file
from diffgate.infrastructure.filesystem import (
    assert_file_exists,
    create_empty_file_if_not_exists,
    file_exists,
)
from diffgate.infrastructure.process import BackgroundLaunch, BlockingLaunch

if TYPE_CHECKING:
    from collections.abc import Callable

    from diffgate.domain.model.launch_handle import LaunchHandle
    from diffgate.domain.model.launch_request import LaunchRequest
    from diffgate.domain.model.process_output import ProcessOutput
    from diffgate.domain.ports.launch_strategy import LaunchStrategyProtocol
    from diffgate.domain.ports.output_formatter import OutputFormatterProtocol
    from diffgate.domain.ports.rate_limiter import RateLimiterProtocol

_EMIT_LOCK = threading.Lock()


class DiffReporter:
    """External diff program with memoized availability and gated launch.

    Collaborators are injected so tests can substitute stubs:
    rate limiter, launch strategies, output formatter and sink,
    existence check and binary probe.
    """

    def __init__(
        self,
        name: str,
        executable_path: str | None = None,
        *,
        image_capable: bool = False,
        rate_limiter: RateLimiterProtocol | None = None,
        formatter: OutputFormatterProtocol | None = None,
        output: TextIO | None = None,
        blocking: LaunchStrategyProtocol | None = None,
        background: LaunchStrategyProtocol | None = None,
        exists: Callable[[str | None], bool] = file_exists,
        binary_probe: Callable[[str], bool] = is_binary_file,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            name: Reporter identifier. Must not be empty.
            executable_path: Program to launch. None = never available.
            image_capable: Reporter can diff binary (image) files.
            rate_limiter: Vetoes non-blocking launches. Default allows all.
            formatter: Formats captured output. Default PlainTextFormatter.
            output: Sink for formatted output. Default sys.stdout at emit time.
            blocking: Strategy for block_until_exit=True.
            background: Strategy for block_until_exit=False.
            exists: Existence check used for the availability probe.
            binary_probe: Classifies file content as binary.
            logger: Logger. Default module logger.

        Raises:
            MissingReporterNameError: If name is empty.
        """
        if not name:
            raise MissingReporterNameError

        self.name = name
        self.executable_path = executable_path
        self.image_capable = image_capable

        self._rate_limiter = rate_limiter or NeverSuppress()
        self._formatter = formatter or PlainTextFormatter()
        self._output = output
        self._blocking = blocking or BlockingLaunch()
        self._background = background or BackgroundLaunch()
        self._exists = exists
        self._binary_probe = binary_probe
        self._logger = logger or logging.getLogger(__name__)

        self._availability = Availability.UNKNOWN

    @classmethod
    def from_command(cls, name: str, command: str, **kwargs: object) -> DiffReporter:
        """Create reporter for a program looked up on PATH.

        Unresolved command gives a reporter that is never available.
        """
        return cls(name, shutil.which(command), **kwargs)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"DiffReporter({self.name!r}, {self.executable_path!r})"

    @property
    def availability(self) -> Availability:
        """Current availability state (UNKNOWN until first probe)."""
        return self._availability

    def is_available(self) -> bool:
        """Check executable exists. Probed once, memoized for the instance lifetime."""
        if not self._availability.resolved:
            found = self._exists(self.executable_path)
            self._availability = Availability.FOUND if found else Availability.NOT_FOUND
            self._logger.debug(
                "reporter %s: executable %s %s",
                self.name,
                self.executable_path,
                "found" if found else "not found",
            )
        return self._availability is Availability.FOUND

    def can_image_diff(self) -> bool:
        """Whether this reporter can diff binary (image) files."""
        return self.image_capable

    def can_handle(self, is_binary: bool) -> bool:
        """Eligibility for content of the given kind.

        Image-capable reporters handle anything, others only text.
        """
        return self.can_image_diff() or not is_binary

    def can_report_on(self, file_path: str) -> bool:
        """Check reporter can show file_path.

        Raises:
            ApprovalFileNotFoundError: If file_path does not exist.
        """
        assert_file_exists(file_path)

        if not self.is_available():
            return False

        if self.can_image_diff():
            return True

        return self.can_handle(self._binary_probe(file_path))

    def dispatch(self, request: LaunchRequest) -> LaunchHandle | None:
        """Launch the diff program for request.

        Non-blocking requests vetoed by the rate limiter are a silent no-op.
        Blocking requests bypass the rate limiter.

        Returns:
            Handle of the launched process, None if suppressed.
        """
        if not request.block_until_exit and self._rate_limiter.check(
            request.approved_path,
            request.received_path,
            request.process_options,
        ):
            self._logger.debug(
                "reporter %s: launch suppressed for %s",
                self.name,
                request.received_path,
            )
            return None

        if create_empty_file_if_not_exists(request.approved_path):
            self._logger.debug("created empty approved file %s", request.approved_path)

        strategy = self._blocking if request.block_until_exit else self._background
        executable = self.executable_path or ""
        arguments = request.arguments

        self._logger.info("CMD: %s %s", executable, " ".join(arguments))

        return strategy.launch(executable, arguments, request.process_options, self._emit)

    def _emit(self, output: ProcessOutput) -> None:
        """Write consolidated output once, only if non-empty."""
        if output.is_empty:
            return
        text = self._formatter.format(output)
        if not text:
            return
        sink = self._output if self._output is not None else sys.stdout
        with _EMIT_LOCK:
            sink.write(text)
            sink.flush()
