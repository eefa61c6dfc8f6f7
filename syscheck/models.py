#!/usr/bin/env python3
"""
Data models for system validation.

Contains the specs validators check against, the issues they produce,
and the aggregated results of a full check run.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from enum import Enum


class IssueType(Enum):
    """Types of validation issues."""
    CGROUP_READ = "cgroup_read"
    MISSING_REQUIRED_CGROUP = "missing_required_cgroup"
    MISSING_OPTIONAL_CGROUP = "missing_optional_cgroup"


class Severity(Enum):
    """Issue severity levels."""
    ERROR = "error"
    WARNING = "warning"


class ReportSeverity(Enum):
    """Severity of a single reported item."""
    GOOD = "good"
    WARN = "warn"
    BAD = "bad"


@dataclass(frozen=True)
class CgroupSpec:
    """Cgroup subsystems the host must (required) or should (optional) enable."""
    required: List[str] = field(default_factory=list)
    optional: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class SysSpec:
    """Specification of the system a node is validated against."""
    cgroup_spec: CgroupSpec = field(default_factory=CgroupSpec)

    def to_dict(self) -> Dict:
        """Convert spec to dictionary for JSON serialization."""
        return {
            "cgroupSpec": {
                "required": list(self.cgroup_spec.required),
                "optional": list(self.cgroup_spec.optional),
            }
        }


@dataclass
class ValidationIssue:
    """An aggregated validation error or warning."""
    message: str
    error_type: IssueType
    severity: Severity = Severity.ERROR
    validator: Optional[str] = None
    recommendation: Optional[str] = None
    metadata: Optional[Dict] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def create_error(
        cls,
        message: str,
        error_type: IssueType,
        validator: Optional[str] = None,
        recommendation: Optional[str] = None,
        metadata: Optional[Dict] = None
    ) -> "ValidationIssue":
        """Create an issue with ERROR severity."""
        return cls(
            message=message,
            error_type=error_type,
            severity=Severity.ERROR,
            validator=validator,
            recommendation=recommendation,
            metadata=metadata or {}
        )

    @classmethod
    def create_warning(
        cls,
        message: str,
        error_type: IssueType,
        validator: Optional[str] = None,
        recommendation: Optional[str] = None,
        metadata: Optional[Dict] = None
    ) -> "ValidationIssue":
        """Create an issue with WARNING severity."""
        return cls(
            message=message,
            error_type=error_type,
            severity=Severity.WARNING,
            validator=validator,
            recommendation=recommendation,
            metadata=metadata or {}
        )

    def to_dict(self) -> Dict:
        """Convert issue to dictionary for JSON serialization."""
        result = {
            "type": self.error_type.value,
            "severity": self.severity.value,
            "message": self.message,
            "validator": self.validator,
            "recommendation": self.recommendation,
        }

        if self.metadata:
            result.update(self.metadata)

        return result


@dataclass
class CheckResults:
    """Results of running a set of validators."""
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    validators: List[str] = field(default_factory=list)
    execution_time: float = 0.0

    def add_error(self, error: ValidationIssue) -> None:
        """Add an issue to the appropriate list based on severity."""
        if error.severity == Severity.ERROR:
            self.errors.append(error)
        else:
            self.warnings.append(error)

    def get_all_issues(self) -> List[ValidationIssue]:
        """Get all issues (errors + warnings)."""
        return self.errors + self.warnings

    def get_summary_by_type(self) -> Dict[str, int]:
        """Get count of issues by issue type."""
        summary = {}
        for issue in self.get_all_issues():
            error_type = issue.error_type.value
            summary[error_type] = summary.get(error_type, 0) + 1
        return summary

    def get_summary_by_validator(self) -> Dict[str, int]:
        """Get count of issues by validator."""
        summary = {}
        for issue in self.get_all_issues():
            if issue.validator:
                summary[issue.validator] = summary.get(issue.validator, 0) + 1
        return summary

    def has_errors(self) -> bool:
        """Check if there are any errors (not warnings)."""
        return len(self.errors) > 0

    def to_dict(self) -> Dict:
        """Convert results to dictionary for JSON serialization."""
        return {
            "timestamp": None,  # Will be set by reporter
            "validators": self.validators,
            "execution_time": self.execution_time,
            "summary": {
                "total_errors": len(self.errors),
                "total_warnings": len(self.warnings),
                "by_type": self.get_summary_by_type(),
                "by_validator": self.get_summary_by_validator(),
            },
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
        }
