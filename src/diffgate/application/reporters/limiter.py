"""Default rate limiter: allows every launch.

Real launch-limiting policies are injected by the caller
(see RateLimiterProtocol).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class NeverSuppress:
    """Rate limiter that never vetoes a launch."""

    def check(
        self,
        approved_path: str,
        received_path: str,
        options: Mapping[str, object],
    ) -> bool:
        """Always allow."""
        del approved_path, received_path, options
        return False
