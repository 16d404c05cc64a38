"""pytest fixtures for approval tests.

User overrides diffgate_audit_config in their conftest.py.
"""

from __future__ import annotations

import fnmatch
from typing import TYPE_CHECKING

import pytest

from diffgate.domain.model.audit_config import DEFAULT_APPROVED_FILE_PATTERN, AuditConfig
from diffgate.presentation.pytest_plugin.registry import ApprovedFileRegistry

if TYPE_CHECKING:
    from collections.abc import Callable

REGISTRY_KEY = pytest.StashKey[ApprovedFileRegistry]()
AUDIT_CONFIG_KEY = pytest.StashKey[AuditConfig]()

INI_ERROR_ON_STALE = "diffgate_error_on_stale_approved_files"
INI_APPROVED_PATTERN = "diffgate_approved_file_pattern"
INI_IGNORE_STALE = "diffgate_ignore_stale_approved_files"


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def ignore_patterns_predicate(patterns: tuple[str, ...]) -> Callable[[str], bool] | None:
    """Create predicate that ignores paths matching any fnmatch pattern.

    Uses fnmatch: * matches any characters including /.

    Returns:
        Predicate, or None if no patterns given.
    """
    if not patterns:
        return None

    def _ignored(path: str) -> bool:
        return any(fnmatch.fnmatch(path, p) for p in patterns)

    return _ignored


def audit_config_from_ini(config: pytest.Config) -> AuditConfig:
    """Build AuditConfig from ini options."""
    patterns = tuple(str(p) for p in config.getini(INI_IGNORE_STALE) if str(p).strip())
    return AuditConfig(
        error_on_stale_approved_files=bool(config.getini(INI_ERROR_ON_STALE)),
        should_ignore_stale_approved_file=ignore_patterns_predicate(patterns),
        approved_file_pattern=_get_ini_value(
            config, INI_APPROVED_PATTERN, DEFAULT_APPROVED_FILE_PATTERN
        ),
    )


@pytest.fixture(scope="session")
def approved_files(
    request: pytest.FixtureRequest,
    diffgate_audit_config: AuditConfig,
) -> ApprovedFileRegistry:
    """Registry of approved files referenced by this run.

    Tests add every approved file they compare against; the registry is
    audited for stale approvals at session finish.

    Returns:
        Session-wide ApprovedFileRegistry
    """
    request.config.stash[AUDIT_CONFIG_KEY] = diffgate_audit_config
    return request.config.stash[REGISTRY_KEY]


@pytest.fixture(scope="session")
def diffgate_audit_config(request: pytest.FixtureRequest) -> AuditConfig:
    """Stale approval audit configuration.

    Defaults come from ini options. User overrides this fixture in
    conftest.py for predicates ini cannot express.

    Returns:
        AuditConfig
    """
    return audit_config_from_ini(request.config)
