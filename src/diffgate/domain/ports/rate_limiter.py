"""Rate limiter port: vetoes non-blocking reporter launches."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class RateLimiterProtocol(Protocol):
    """Contract for launch rate limiters (circuit breakers).

    Treated as an opaque synchronous query. Implementations serialize
    their own bookkeeping.
    """

    def check(
        self,
        approved_path: str,
        received_path: str,
        options: Mapping[str, object],
    ) -> bool:
        """Decide whether to suppress a launch.

        Returns:
            True to suppress the launch, False to allow it.
        """
        ...
