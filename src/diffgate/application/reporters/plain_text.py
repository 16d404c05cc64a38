"""Plain text formatter for reporter process output.

Stdlib-only. Each non-empty stream becomes one block between banners.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from diffgate.domain.model.process_output import ProcessOutput

BANNER = "============"


class PlainTextFormatter:
    """Formats captured stdout/stderr as banner-delimited blocks."""

    def __init__(self, banner: str = BANNER) -> None:
        """Initialize formatter.

        Args:
            banner: Delimiter line around each block.
        """
        if not banner:
            raise ValueError("banner must not be empty")
        self._banner = banner

    def format(self, output: ProcessOutput) -> str:
        """Format output. Empty streams omitted, empty output gives ""."""
        return "".join(self._block(label, text) for label, text in output.streams())

    def _block(self, label: str, text: str) -> str:
        banner = self._banner
        return f"\n{banner}\n{label}:\n{banner}\n{text}\n{banner}\n"
