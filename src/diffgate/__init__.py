"""diffgate - diff reporter launching and stale approval checks for approval tests."""

__version__ = "0.1.0"

from diffgate.application.audit.stale_approvals import audit_stale_approved_files, normalize_path
from diffgate.application.reporters.diff_reporter import DiffReporter
from diffgate.domain.exceptions import (
    ApprovalFileNotFoundError,
    DiffGateError,
    MissingReporterNameError,
    StaleApprovedFilesError,
)
from diffgate.domain.model import AuditConfig, LaunchRequest, ProcessOutput

__all__ = [
    "ApprovalFileNotFoundError",
    "AuditConfig",
    "DiffGateError",
    "DiffReporter",
    "LaunchRequest",
    "MissingReporterNameError",
    "ProcessOutput",
    "StaleApprovedFilesError",
    "__version__",
    "audit_stale_approved_files",
    "normalize_path",
]
