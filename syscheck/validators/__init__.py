"""System validators."""

from .base import Validator
from .cgroups import CgroupReadError, CgroupsValidator, read_enabled_subsystems

__all__ = [
    "Validator",
    "CgroupsValidator",
    "CgroupReadError",
    "read_enabled_subsystems",
]
