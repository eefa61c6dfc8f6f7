"""Utility modules for system checking."""

from .spec_utils import SpecError, default_sys_spec, load_sys_spec, parse_sys_spec

__all__ = [
    "SpecError",
    "default_sys_spec",
    "load_sys_spec",
    "parse_sys_spec",
]
