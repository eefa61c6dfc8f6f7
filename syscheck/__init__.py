"""System spec validation package."""

from .models import (
    CgroupSpec,
    CheckResults,
    IssueType,
    ReportSeverity,
    Severity,
    SysSpec,
    ValidationIssue,
)

__all__ = [
    "CgroupSpec",
    "CheckResults",
    "IssueType",
    "ReportSeverity",
    "Severity",
    "SysSpec",
    "ValidationIssue",
]
