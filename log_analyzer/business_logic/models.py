"""Log record model."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Severity(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class LogRecord:
    """One parsed log line."""

    timestamp: datetime
    severity: Severity
    message: str

    def __str__(self) -> str:
        return f"LEVEL: {self.severity.value} - DATE: {self.timestamp.isoformat()} - MESSAGE: {self.message}"
