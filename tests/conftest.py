import pytest

from syscheck.models import ReportSeverity


PROC_CGROUPS_HEADER = "#subsys_name\thierarchy\tnum_cgroups\tenabled\n"


class RecordingReporter:
    """Reporter stub that keeps every reported item."""

    def __init__(self):
        self.events = []

    def report(self, key: str, message: str, severity: ReportSeverity) -> None:
        self.events.append((key, message, severity))


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def cgroups_file(tmp_path):
    """Write a fake /proc/cgroups and return its path."""
    def _write(*lines, header=True):
        path = tmp_path / "cgroups"
        content = PROC_CGROUPS_HEADER if header else ""
        content += "".join(line + "\n" for line in lines)
        path.write_text(content)
        return path
    return _write
