"""Console formatter: ProcessOutput → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from diffgate.domain.model.process_output import ProcessOutput


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console formatter.

    Attributes:
        width: Console width in characters.
        force_terminal: Emit ANSI styles even when not writing to a tty.
        show_returncode: Add exit code line after the blocks.
    """

    width: int = 120
    force_terminal: bool = False
    show_returncode: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleFormatter:
    """Console formatter: each stream under a titled rule.

    Output is str, not print(). Caller decides destination.
    Stream text is printed verbatim (no markup, no highlighting).
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize formatter.

        Args:
            config: Formatter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def format(self, output: ProcessOutput) -> str:
        """Format output. Empty output gives ""."""
        if output.is_empty:
            return ""

        buffer = StringIO()
        console = Console(
            file=buffer,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        for label, text in output.streams():
            style = "bold red" if label == "stderr" else "bold"
            console.print()
            console.rule(f"[{style}]{label}[/{style}]")
            console.print(text, markup=False, highlight=False, soft_wrap=True)
            console.rule()

        if self._config.show_returncode and output.returncode is not None:
            console.print(f"exit code: {output.returncode}", markup=False, highlight=False)

        return buffer.getvalue()
