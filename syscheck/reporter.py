#!/usr/bin/env python3
"""
System check reporting module.

Handles per-item reporting while validators run, plus result reporting,
JSON output generation, and console summaries once they are done.
"""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Protocol, TextIO

from .models import CheckResults, ReportSeverity


class Reporter(Protocol):
    """Sink for per-item validation reports."""

    def report(self, key: str, message: str, severity: ReportSeverity) -> None:
        ...


_COLORS: Dict[ReportSeverity, str] = {
    ReportSeverity.GOOD: "\033[32m",
    ReportSeverity.WARN: "\033[33m",
    ReportSeverity.BAD: "\033[31m",
}
_RESET = "\033[0m"


class StreamReporter:
    """Writes each reported item as a ``KEY: message`` line to a stream."""

    def __init__(self, stream: Optional[TextIO] = None, colorize: Optional[bool] = None):
        self.stream = stream if stream is not None else sys.stdout
        if colorize is None:
            colorize = hasattr(self.stream, "isatty") and self.stream.isatty()
        self.colorize = colorize

    def report(self, key: str, message: str, severity: ReportSeverity) -> None:
        """Write a single item report."""
        if self.colorize:
            message = f"{_COLORS[severity]}{message}{_RESET}"
        self.stream.write(f"{key}: {message}\n")


class ResultsReporter:
    """Handles reporting of system check results."""

    def __init__(self, output_file: str = "test-results/system-check.json"):
        self.output_file = Path(output_file)

    def report_results(self, results: CheckResults, format_type: str = "console", suppressed_warning_count: int = 0) -> bool:
        """Report results to both JSON file and console. Returns True if no errors."""
        self.output_file.parent.mkdir(parents=True, exist_ok=True)

        self._write_json_report(results)

        if format_type == "json":
            self._display_json_output(results)
        else:
            self._display_console_summary(results, suppressed_warning_count=suppressed_warning_count)

        return not results.has_errors()

    def _report_data(self, results: CheckResults) -> Dict:
        report_data = results.to_dict()
        report_data["timestamp"] = datetime.now().isoformat()
        return report_data

    def _write_json_report(self, results: CheckResults) -> None:
        """Write detailed JSON report to file."""
        with open(self.output_file, 'w') as f:
            json.dump(self._report_data(results), f, indent=2, default=str)

    def _display_console_summary(self, results: CheckResults, suppressed_warning_count: int = 0) -> None:
        """Display summary information on console."""
        print()

        total_errors = len(results.errors)
        total_warnings = len(results.warnings)

        if total_errors > 0 or total_warnings > 0:
            print("Summary:")
            print("=" * 72)
            print(f"• Total errors: {total_errors}")
            print(f"• Total warnings: {total_warnings}")
            print()

            for issue in results.errors:
                print(f"  [ERROR] {issue.validator}: {issue.message}")
            for issue in results.warnings:
                print(f"  [WARNING] {issue.validator}: {issue.message}")
            print()

            recommendations = [issue.recommendation for issue in results.get_all_issues() if issue.recommendation]
            if recommendations:
                print("Recommendations:")
                for recommendation in recommendations:
                    print(f"  • {recommendation}")
                print()

            print(f"Full report: {self.output_file}")
        else:
            print("System check passed!")
            if suppressed_warning_count > 0:
                print(f"{suppressed_warning_count} warning(s) suppressed - run with --include-warnings to see them")
            print(f"Detailed report: {self.output_file}")

    def _display_json_output(self, results: CheckResults) -> None:
        """Display results in JSON format."""
        print(json.dumps(self._report_data(results), indent=2, default=str))
