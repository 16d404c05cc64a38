"""Diff reporters and formatters for their captured output.

PlainTextFormatter uses stdlib only, ConsoleFormatter renders with rich.
"""

from diffgate.application.reporters.console import ConsoleConfig, ConsoleFormatter
from diffgate.application.reporters.diff_reporter import DiffReporter
from diffgate.application.reporters.limiter import NeverSuppress
from diffgate.application.reporters.plain_text import PlainTextFormatter

__all__ = [
    "ConsoleConfig",
    "ConsoleFormatter",
    "DiffReporter",
    "NeverSuppress",
    "PlainTextFormatter",
]
