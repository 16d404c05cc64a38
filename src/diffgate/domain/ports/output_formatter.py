"""Output formatter port: ProcessOutput → str."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from diffgate.domain.model.process_output import ProcessOutput


class OutputFormatterProtocol(Protocol):
    """Protocol for reporter output formatters.

    Output is str, not print(). Caller decides destination.
    Empty streams are omitted; empty output formats to "".
    """

    def format(self, output: ProcessOutput) -> str:
        """Format captured process output as delimited blocks."""
        ...
