from datetime import datetime

from log_analyzer.business_logic.models import Severity


def strip_line_ending(line: str) -> str:
    """Remove the trailing newline (and carriage return) from a raw line."""
    return line.rstrip("\r\n")


def parse_timestamp(value: str, timestamp_format: str) -> datetime:
    """Parse a timestamp field with the single configured format. Fields must be zero-padded."""
    try:
        parsed = datetime.strptime(value, timestamp_format)
    except ValueError as e:
        raise ValueError(f"Invalid timestamp '{value}': {e}") from e
    if parsed.strftime(timestamp_format) != value:
        raise ValueError(f"Invalid timestamp '{value}': does not match format '{timestamp_format}' exactly")
    return parsed


def parse_severity(name: str | Severity) -> Severity:
    """Exact, case-sensitive lookup of a severity by name."""
    if isinstance(name, Severity):
        return name
    try:
        return Severity[name]
    except KeyError:
        raise ValueError(f"Unknown severity '{name}'") from None
