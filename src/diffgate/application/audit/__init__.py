"""Stale approved files audit."""

from diffgate.application.audit.stale_approvals import (
    approved_directories,
    audit_stale_approved_files,
    find_stale_approved_files,
    normalize_path,
)

__all__ = [
    "approved_directories",
    "audit_stale_approved_files",
    "find_stale_approved_files",
    "normalize_path",
]
