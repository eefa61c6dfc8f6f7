#!/usr/bin/env python3
"""Base class shared by all system validators."""

from abc import ABC, abstractmethod
from typing import List, Tuple

from ..models import SysSpec, ValidationIssue


class Validator(ABC):
    """Checks one aspect of the host against a SysSpec."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name identifying the validator in reports."""

    @abstractmethod
    def validate(self, spec: SysSpec) -> Tuple[List[ValidationIssue], List[ValidationIssue]]:
        """Validate the host and return (warnings, errors)."""
