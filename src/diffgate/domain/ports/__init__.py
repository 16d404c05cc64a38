"""Domain ports (interfaces/protocols)."""

from diffgate.domain.ports.launch_strategy import LaunchStrategyProtocol
from diffgate.domain.ports.output_formatter import OutputFormatterProtocol
from diffgate.domain.ports.rate_limiter import RateLimiterProtocol

__all__ = [
    "LaunchStrategyProtocol",
    "OutputFormatterProtocol",
    "RateLimiterProtocol",
]
