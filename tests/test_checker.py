"""Tests for system checker orchestration and result aggregation."""

from syscheck.checker import SystemChecker, default_validators
from syscheck.models import CgroupSpec, CheckResults, IssueType, SysSpec, ValidationIssue
from syscheck.validators import CgroupsValidator, Validator


class StaticValidator(Validator):
    """Validator returning fixed issues."""

    def __init__(self, name, warnings=(), errors=()):
        self._name = name
        self.warnings = list(warnings)
        self.errors = list(errors)
        self.calls = 0

    @property
    def name(self):
        return self._name

    def validate(self, spec):
        self.calls += 1
        return self.warnings, self.errors


class TestSystemChecker:
    """Test suite for running validators."""

    def test_runs_every_validator_once_in_order(self):
        first = StaticValidator("first")
        second = StaticValidator("second")

        results = SystemChecker(SysSpec(), [first, second]).run_all_checks()

        assert results.validators == ["first", "second"]
        assert first.calls == 1
        assert second.calls == 1
        assert results.execution_time >= 0

    def test_collects_issues_from_all_validators(self):
        error = ValidationIssue.create_error("broken", IssueType.MISSING_REQUIRED_CGROUP, validator="first")
        warning = ValidationIssue.create_warning("meh", IssueType.MISSING_OPTIONAL_CGROUP, validator="second")

        results = SystemChecker(SysSpec(), [
            StaticValidator("first", errors=[error]),
            StaticValidator("second", warnings=[warning]),
        ]).run_all_checks()

        assert results.errors == [error]
        assert results.warnings == [warning]
        assert results.has_errors()

    def test_warnings_only_is_not_an_error(self):
        warning = ValidationIssue.create_warning("meh", IssueType.MISSING_OPTIONAL_CGROUP)

        results = SystemChecker(SysSpec(), [StaticValidator("only", warnings=[warning])]).run_all_checks()

        assert not results.has_errors()

    def test_no_validators(self):
        results = SystemChecker(SysSpec()).run_all_checks()

        assert results.validators == []
        assert not results.has_errors()

    def test_with_cgroups_validator(self, reporter, cgroups_file):
        path = cgroups_file("cpu 1 1 1", "memory 2 1 0", "pids 3 1 1")
        spec = SysSpec(cgroup_spec=CgroupSpec(required=["cpu", "memory"], optional=["pids", "blkio"]))

        results = SystemChecker(spec, default_validators(reporter, cgroups_path=path)).run_all_checks()

        assert [e.message for e in results.errors] == ["missing required cgroups: memory"]
        assert [w.message for w in results.warnings] == ["missing optional cgroups: blkio"]
        assert results.get_summary_by_validator() == {"cgroups": 2}
        assert len(reporter.events) == 4


class TestDefaultValidators:

    def test_default_validators(self, reporter):
        validators = default_validators(reporter, cgroups_path="/tmp/cgroups")

        assert len(validators) == 1
        assert isinstance(validators[0], CgroupsValidator)
        assert validators[0].cgroups_path == "/tmp/cgroups"
        assert validators[0].reporter is reporter


class TestCheckResults:
    """Test suite for aggregated results."""

    def test_add_error_routes_by_severity(self):
        results = CheckResults()
        results.add_error(ValidationIssue.create_error("e", IssueType.CGROUP_READ))
        results.add_error(ValidationIssue.create_warning("w", IssueType.MISSING_OPTIONAL_CGROUP))

        assert [i.message for i in results.errors] == ["e"]
        assert [i.message for i in results.warnings] == ["w"]
        assert [i.message for i in results.get_all_issues()] == ["e", "w"]

    def test_to_dict(self):
        results = CheckResults(validators=["cgroups"])
        results.add_error(ValidationIssue.create_error(
            "missing required cgroups: memory",
            IssueType.MISSING_REQUIRED_CGROUP,
            validator="cgroups",
            metadata={"missing": ["memory"]},
        ))

        data = results.to_dict()

        assert data["validators"] == ["cgroups"]
        assert data["summary"]["total_errors"] == 1
        assert data["summary"]["total_warnings"] == 0
        assert data["summary"]["by_type"] == {"missing_required_cgroup": 1}
        assert data["errors"][0]["message"] == "missing required cgroups: memory"
        assert data["errors"][0]["severity"] == "error"
        assert data["errors"][0]["missing"] == ["memory"]
        assert data["warnings"] == []
