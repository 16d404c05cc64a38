"""Domain model: immutable value objects."""

from diffgate.domain.model.audit_config import DEFAULT_APPROVED_FILE_PATTERN, AuditConfig
from diffgate.domain.model.availability import Availability
from diffgate.domain.model.launch_handle import LaunchHandle
from diffgate.domain.model.launch_request import LaunchRequest
from diffgate.domain.model.process_output import ProcessOutput

__all__ = [
    "DEFAULT_APPROVED_FILE_PATTERN",
    "AuditConfig",
    "Availability",
    "LaunchHandle",
    "LaunchRequest",
    "ProcessOutput",
]
