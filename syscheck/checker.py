#!/usr/bin/env python3
"""
Main system checker orchestration.

Runs every validator against the spec and collects their issues.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional, Union

from .models import CheckResults, SysSpec
from .reporter import Reporter
from .validators import CgroupsValidator, Validator
from .validators.cgroups import CGROUPS_PATH

logger = logging.getLogger(__name__)


def default_validators(reporter: Reporter, cgroups_path: Union[str, Path] = CGROUPS_PATH) -> List[Validator]:
    """Build the standard list of validators."""
    return [
        CgroupsValidator(reporter, cgroups_path=cgroups_path),
    ]


class SystemChecker:
    """Main system checker that runs all validators."""

    def __init__(self, spec: SysSpec, validators: Optional[List[Validator]] = None):
        self.spec = spec
        self.validators = validators or []

    def run_all_checks(self) -> CheckResults:
        """Run all validators and return results."""
        start_time = time.time()
        results = CheckResults()

        for validator in self.validators:
            logger.debug("Running %s validator", validator.name)
            warnings, errors = validator.validate(self.spec)
            results.validators.append(validator.name)

            for error in errors:
                results.add_error(error)
            for warning in warnings:
                results.add_error(warning)

            logger.debug("%s validator: %d error(s), %d warning(s)", validator.name, len(errors), len(warnings))

        results.execution_time = time.time() - start_time
        return results
