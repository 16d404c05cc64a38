"""Memoized availability of a reporter executable."""

from __future__ import annotations

from enum import Enum


class Availability(Enum):
    """Result of the one-time executable lookup.

    UNKNOWN until the first probe, then FOUND or NOT_FOUND for the
    lifetime of the reporter. Never reset.
    """

    UNKNOWN = "unknown"
    FOUND = "found"
    NOT_FOUND = "not_found"

    @property
    def resolved(self) -> bool:
        """Whether the lookup already happened."""
        return self is not Availability.UNKNOWN
