from typing import Iterable, List

from log_analyzer.business_logic.models import LogRecord, Severity
from log_analyzer.utils.constants import TARGET_SEVERITY
from log_analyzer.utils.helpers import parse_severity


def filter_by_severity(records: Iterable[LogRecord], severity: str | Severity = TARGET_SEVERITY) -> List[LogRecord]:
    """Return the records at the given severity, in their original order."""
    target = parse_severity(severity)
    return [record for record in records if record.severity is target]
