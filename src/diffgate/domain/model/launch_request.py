"""LaunchRequest: one decision-to-launch event for a diff reporter."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Set by the launch strategies to capture output.
RESERVED_PROCESS_OPTIONS = frozenset({"args", "stdout", "stderr", "capture_output"})


@dataclass(frozen=True, slots=True)
class LaunchRequest:
    """Immutable request to show approved vs received in a diff tool.

    Attributes:
        approved_path: Baseline file. Created empty before launch if missing.
        received_path: Freshly produced output.
        block_until_exit: True = synchronous launch (bypasses rate limiter).
        argument_override: Explicit argument list. None = received, approved.
        process_options: Keyword arguments forwarded verbatim to subprocess.
            Must not contain RESERVED_PROCESS_OPTIONS.
    """

    approved_path: str
    received_path: str
    block_until_exit: bool = False
    argument_override: tuple[str, ...] | None = None
    process_options: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.approved_path:
            raise ValueError("approved_path must not be empty")
        if not self.received_path:
            raise ValueError("received_path must not be empty")
        reserved = sorted(RESERVED_PROCESS_OPTIONS.intersection(self.process_options))
        if reserved:
            raise ValueError(
                f"process_options must not set {', '.join(reserved)}: output is always captured"
            )
        if self.argument_override is not None and not isinstance(self.argument_override, tuple):
            object.__setattr__(self, "argument_override", tuple(self.argument_override))

    @property
    def arguments(self) -> tuple[str, ...]:
        """Arguments passed to the reporter executable.

        Defaults to (received, approved). Viewers expecting another order
        must be given argument_override.
        """
        if self.argument_override is not None:
            return self.argument_override
        return (self.received_path, self.approved_path)
