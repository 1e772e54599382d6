import threading
from datetime import datetime

import pytest

from log_analyzer.business_logic.models import LogRecord, Severity


VALID_LINES = [
    "2024-01-01 10:00:00;INFO;boot",
    "2024-01-01 10:00:01;ERROR;disk fail",
    "2024-01-01 10:00:02;WARNING;high memory usage",
    "2024-01-01 10:00:03;ERROR;connection refused; retrying",
]


def write_lines(path, lines):
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    return str(path)


def worker_threads():
    """Threads still alive from the analyzer's worker pool."""
    return [t for t in threading.enumerate() if t.name.startswith("log-worker")]


def make_records(count, severity=Severity.ERROR):
    return [LogRecord(datetime(2024, 1, 1, 12, 0, i % 60), severity, f"record {i}") for i in range(count)]


@pytest.fixture
def valid_log_file(tmp_path):
    """Create a log file where every line is well-formed."""
    return write_lines(tmp_path / "servidor.log", VALID_LINES)


@pytest.fixture
def mixed_log_file(tmp_path):
    """Create the three-line scenario log: one INFO, one ERROR, one corrupted line."""
    lines = [
        "2024-01-01 10:00:00;INFO;boot",
        "2024-01-01 10:00:01;ERROR;disk fail",
        "garbage-line",
    ]
    return write_lines(tmp_path / "mixed.log", lines)


@pytest.fixture
def corrupted_log_file(tmp_path):
    """Create a log file with one line per kind of corruption."""
    lines = [
        "2024-01-01 10:00:00;INFO",
        "01/01/2024 10:00:00;ERROR;wrong date format",
        "2024-01-01 10:00:00;error;lowercase severity",
        "2024-01-01 10:00:00;CRITICAL;unknown severity",
        "",
    ]
    return write_lines(tmp_path / "corrupted.log", lines)


@pytest.fixture
def no_errors_log_file(tmp_path):
    """Create a log file without any ERROR line."""
    lines = [
        "2024-01-01 10:00:00;INFO;boot",
        "2024-01-01 10:00:05;WARNING;slow response",
    ]
    return write_lines(tmp_path / "no_errors.log", lines)


@pytest.fixture
def empty_log_file(tmp_path):
    """Create an empty log file."""
    log_file = tmp_path / "empty.log"
    log_file.touch()
    return str(log_file)


@pytest.fixture
def report_path(tmp_path):
    return tmp_path / "relatorio.txt"
