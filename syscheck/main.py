#!/usr/bin/env python3
"""
Main entry point for system checking.

Usage:
    syscheck [--spec FILE] [--cgroups-path PATH]
    python3 -m syscheck.main [--format json]
"""

import sys
import argparse
import logging

from .checker import SystemChecker, default_validators
from .reporter import ResultsReporter, StreamReporter
from .utils import SpecError, default_sys_spec, load_sys_spec
from .validators.cgroups import CGROUPS_PATH

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Validate that the host satisfies a system spec")
    parser.add_argument('--spec', help='JSON spec file (default: built-in spec)')
    parser.add_argument('--cgroups-path', default=CGROUPS_PATH, help=f'Cgroup status file (default: {CGROUPS_PATH})')
    parser.add_argument('--format', choices=['console', 'json'], default='console', help='Output format')
    parser.add_argument('--output', '-o', default='test-results/system-check.json', help='Output file for detailed JSON report')
    parser.add_argument('--include-warnings', action='store_true', help='Include warnings in output (default: errors only)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point for system checking."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        spec = load_sys_spec(args.spec) if args.spec else default_sys_spec()
    except SpecError as e:
        logger.error("%s", e)
        return 2

    # Item lines would corrupt the JSON document on stdout
    if args.format == 'json':
        item_reporter = StreamReporter(stream=sys.stderr)
    else:
        item_reporter = StreamReporter()

    checker = SystemChecker(spec, default_validators(item_reporter, cgroups_path=args.cgroups_path))
    results = checker.run_all_checks()

    # Save warning count before filtering
    warning_count = len(results.warnings)

    if not args.include_warnings:
        results.warnings = []

    reporter = ResultsReporter(args.output)
    success = reporter.report_results(
        results,
        format_type=args.format,
        suppressed_warning_count=warning_count if not args.include_warnings else 0
    )

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
