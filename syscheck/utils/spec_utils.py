#!/usr/bin/env python3
"""
Spec loading utilities.

Handles the built-in default spec and reading specs from JSON files.
"""

import json
from pathlib import Path
from typing import Dict, List, Union

from ..models import CgroupSpec, SysSpec


DEFAULT_REQUIRED_CGROUPS = ["cpu", "cpuacct", "cpuset", "devices", "freezer", "memory"]
DEFAULT_OPTIONAL_CGROUPS = ["pids", "hugetlb", "blkio"]


class SpecError(ValueError):
    """A spec file could not be read or has an invalid shape."""


def default_sys_spec() -> SysSpec:
    """Get the spec used when none is given."""
    return SysSpec(cgroup_spec=CgroupSpec(
        required=list(DEFAULT_REQUIRED_CGROUPS),
        optional=list(DEFAULT_OPTIONAL_CGROUPS),
    ))


def load_sys_spec(spec_file: Union[str, Path]) -> SysSpec:
    """
    Load a SysSpec from a JSON file.

    Expected format:
        {"cgroupSpec": {"required": ["cpu", ...], "optional": ["pids", ...]}}

    ``cgroup_spec`` is accepted in place of ``cgroupSpec``. Missing name
    lists default to empty.
    """
    spec_file = Path(spec_file)
    try:
        with open(spec_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SpecError(f"Invalid JSON in spec file {spec_file}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SpecError(f"Could not read spec file {spec_file}: {e}") from e

    return parse_sys_spec(data, source=str(spec_file))


def parse_sys_spec(data: Dict, source: str = "<spec>") -> SysSpec:
    """Build a SysSpec from already-decoded JSON data."""
    if not isinstance(data, dict):
        raise SpecError(f"Spec in {source} must be a JSON object")

    cgroup_data = data.get("cgroupSpec", data.get("cgroup_spec", {}))
    if not isinstance(cgroup_data, dict):
        raise SpecError(f"cgroupSpec in {source} must be a JSON object")

    return SysSpec(cgroup_spec=CgroupSpec(
        required=_name_list(cgroup_data, "required", source),
        optional=_name_list(cgroup_data, "optional", source),
    ))


def _name_list(data: Dict, key: str, source: str) -> List[str]:
    """Get a list of subsystem names, validating its shape."""
    names = data.get(key)
    if names is None:
        return []
    if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
        raise SpecError(f"cgroupSpec.{key} in {source} must be a list of strings")
    return names
