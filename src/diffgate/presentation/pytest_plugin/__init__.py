"""pytest plugin for diffgate.

Provides fixtures for approval testing:
    approved_files: Session registry of approved files tests referenced
    diffgate_audit_config: Stale approval audit configuration (override in conftest.py)

At session finish the registry is audited for stale approved files.
A violation fails the run and is listed in the terminal summary.

Configuration (pytest.ini or pyproject.toml):
    diffgate_error_on_stale_approved_files: Enable the audit (default: false)
    diffgate_approved_file_pattern: Approved file glob (default: "*.approved.*")
    diffgate_ignore_stale_approved_files: fnmatch patterns exempt from the audit
"""

from __future__ import annotations

import pytest

from diffgate.application.audit.stale_approvals import audit_stale_approved_files
from diffgate.domain.exceptions import StaleApprovedFilesError
from diffgate.domain.model.audit_config import DEFAULT_APPROVED_FILE_PATTERN

# Register fixtures from fixtures module
from diffgate.presentation.pytest_plugin.fixtures import (
    AUDIT_CONFIG_KEY,
    INI_APPROVED_PATTERN,
    INI_ERROR_ON_STALE,
    INI_IGNORE_STALE,
    REGISTRY_KEY,
    approved_files,
    audit_config_from_ini,
    diffgate_audit_config,
)
from diffgate.presentation.pytest_plugin.registry import ApprovedFileRegistry

# Export fixtures for pytest discovery
__all__ = [
    "ApprovedFileRegistry",
    "approved_files",
    "diffgate_audit_config",
]

STALE_ERROR_KEY = pytest.StashKey[StaleApprovedFilesError]()


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        INI_ERROR_ON_STALE,
        "Fail the run when approved files exist that no test referenced",
        type="bool",
        default=False,
    )
    parser.addini(
        INI_APPROVED_PATTERN,
        "Glob matching approved file names",
        default=DEFAULT_APPROVED_FILE_PATTERN,
    )
    parser.addini(
        INI_IGNORE_STALE,
        "fnmatch patterns of approved files exempt from the stale check",
        type="linelist",
        default=[],
    )


def pytest_configure(config: pytest.Config) -> None:
    """Create the session registry."""
    config.stash[REGISTRY_KEY] = ApprovedFileRegistry()


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    """Audit approved files referenced during the session.

    Skipped when the session was interrupted or stopped early: the registry
    is partial and an existing exit status must not be replaced.
    """
    if exitstatus not in (pytest.ExitCode.OK, pytest.ExitCode.TESTS_FAILED) or session.shouldstop:
        return

    config = session.config
    registry = config.stash.get(REGISTRY_KEY, None)
    if registry is None or not registry:
        return

    audit_config = config.stash.get(AUDIT_CONFIG_KEY, None) or audit_config_from_ini(config)
    try:
        audit_stale_approved_files(registry.paths, audit_config)
    except StaleApprovedFilesError as exc:
        config.stash[STALE_ERROR_KEY] = exc
        session.exitstatus = pytest.ExitCode.TESTS_FAILED


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:
    """List stale approved files found at session finish."""
    del exitstatus
    error = config.stash.get(STALE_ERROR_KEY, None)
    if error is None:
        return
    terminalreporter.section("stale approved files", red=True)
    for path in error.stale_paths:
        terminalreporter.write_line(f"  - {path}")
