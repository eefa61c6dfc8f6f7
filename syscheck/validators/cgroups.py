#!/usr/bin/env python3
"""
Cgroup subsystem validation.

Reads the kernel's list of enabled cgroup subsystems and checks the
subsystems declared in the spec's CgroupSpec against it.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from ..models import IssueType, ReportSeverity, SysSpec, ValidationIssue
from ..reporter import Reporter
from .base import Validator

logger = logging.getLogger(__name__)

CGROUPS_PATH = "/proc/cgroups"
CGROUPS_CONFIG_PREFIX = "CGROUPS_"


class CgroupReadError(OSError):
    """The cgroup status source could not be opened or read."""


def read_enabled_subsystems(path: Union[str, Path] = CGROUPS_PATH) -> List[str]:
    """
    Return the names of enabled cgroup subsystems listed in ``path``.

    Each record is ``subsys_name hierarchy num_cgroups enabled``. A
    subsystem counts as enabled when its fourth field is not the literal
    string "0". Comment lines and records with fewer than four fields are
    skipped.
    """
    subsystems = []
    try:
        # Records end at '\n' only; stray bytes stay in their field
        with open(path, 'r', encoding='utf-8', errors='surrogateescape', newline='\n') as f:
            for line in f:
                if line.startswith('#'):
                    continue
                parts = line.split()
                if len(parts) >= 4 and parts[3] != "0":
                    subsystems.append(parts[0])
    except OSError as e:
        raise CgroupReadError(f"failed to get cgroup subsystems: {e}") from e

    logger.debug("Enabled cgroup subsystems in %s: %s", path, " ".join(subsystems))
    return subsystems


class CgroupsValidator(Validator):
    """Validates that the cgroup subsystems a spec declares are enabled."""

    def __init__(self, reporter: Reporter, cgroups_path: Union[str, Path] = CGROUPS_PATH):
        self.reporter = reporter
        self.cgroups_path = cgroups_path

    @property
    def name(self) -> str:
        return "cgroups"

    def validate(self, spec: SysSpec) -> Tuple[List[ValidationIssue], List[ValidationIssue]]:
        """Validate enabled cgroups and return (warnings, errors)."""
        warnings: List[ValidationIssue] = []
        errors: List[ValidationIssue] = []

        try:
            subsystems = read_enabled_subsystems(self.cgroups_path)
        except CgroupReadError as e:
            logger.debug("Cgroup validation aborted: %s", e)
            errors.append(ValidationIssue.create_error(
                message=str(e),
                error_type=IssueType.CGROUP_READ,
                validator=self.name,
                recommendation=f"Make sure {self.cgroups_path} exists and is readable",
            ))
            return warnings, errors

        missing_required = self._validate_subsystems(spec.cgroup_spec.required, subsystems, required=True)
        if missing_required:
            errors.append(ValidationIssue.create_error(
                message=f"missing required cgroups: {' '.join(missing_required)}",
                error_type=IssueType.MISSING_REQUIRED_CGROUP,
                validator=self.name,
                recommendation="Enable the missing cgroup controllers in the kernel configuration or boot parameters",
                metadata={"missing": missing_required},
            ))

        missing_optional = self._validate_subsystems(spec.cgroup_spec.optional, subsystems, required=False)
        if missing_optional:
            warnings.append(ValidationIssue.create_warning(
                message=f"missing optional cgroups: {' '.join(missing_optional)}",
                error_type=IssueType.MISSING_OPTIONAL_CGROUP,
                validator=self.name,
                metadata={"missing": missing_optional},
            ))

        return warnings, errors

    def _validate_subsystems(self, cgroups: List[str], subsystems: List[str], required: bool) -> List[str]:
        """Report each declared cgroup and return the ones not enabled, in order."""
        missing = []
        for cgroup in cgroups:
            item = CGROUPS_CONFIG_PREFIX + cgroup.upper()
            if cgroup in subsystems:
                self.reporter.report(item, "enabled", ReportSeverity.GOOD)
                continue
            if required:
                self.reporter.report(item, "missing", ReportSeverity.BAD)
            else:
                self.reporter.report(item, "missing", ReportSeverity.WARN)
            missing.append(cgroup)
        return missing
