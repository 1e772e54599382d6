"""Text log parser (timestamp;severity;message) with recovery for corrupted lines."""

import os
from typing import Any, BinaryIO, Iterator, List, Optional, Type

from log_analyzer.business_logic.models import LogRecord
from log_analyzer.utils.constants import FIELD_DELIMITER, TIMESTAMP_FORMAT
from log_analyzer.utils.helpers import parse_severity, parse_timestamp, strip_line_ending
from log_analyzer.utils.logger import setup_logger

FIELD_COUNT = 3


class Parser:
    """
    Line-oriented log parser.
    Streams the file one line at a time and yields a LogRecord for every well-formed line.
    Corrupted lines are logged and skipped.
    """

    def __init__(
        self, filename: str, delimiter: str = FIELD_DELIMITER, timestamp_format: str = TIMESTAMP_FORMAT
    ):
        self.filename: str = filename
        self.delimiter: str = delimiter
        self.timestamp_format: str = timestamp_format
        self.logger = setup_logger(os.path.basename(__file__))
        self._file: Optional[BinaryIO] = None
        self.line_number: int = 0
        self.skipped_lines: int = 0

    def __enter__(self) -> "Parser":
        """Open the log file for streaming. Lines are decoded one at a time so a bad byte only drops its own line."""
        if not os.path.isfile(self.filename):
            self.logger.error(f"Input file not found: {self.filename}")
            raise FileNotFoundError(f"File not found: {self.filename}")
        try:
            self._file = open(self.filename, "rb")
            self.logger.info(f"Opened file: {self.filename}")
            return self
        except OSError as e:
            self.logger.error(f"Failed to open file '{self.filename}': {e}")
            raise

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        if self._file:
            self._file.close()
            self.logger.info(f"Closed file: {self.filename}")
        self._file = None

    def records(self) -> Iterator[LogRecord]:
        """
        Generator yielding parsed records in file order.
        """
        if self._file is None:
            raise RuntimeError("Parser not initialized. Use 'with Parser(...) as parser:'")

        for raw_bytes in self._file:
            self.line_number += 1
            try:
                raw_line = raw_bytes.decode("utf-8")
                record = self.parse_line(raw_line, self.delimiter, self.timestamp_format)
            except ValueError as e:
                self.skipped_lines += 1
                shown = raw_bytes.decode("utf-8", errors="replace").rstrip()
                self.logger.warning(f"Corrupted line skipped (line {self.line_number}): {shown!r} ({e})")
                continue
            yield record

    def get_all_records(self) -> List[LogRecord]:
        """Return every well-formed record of the file."""
        records = list(self.records())
        self.logger.info(f"Parsed {len(records):,} records, skipped {self.skipped_lines:,} corrupted lines")
        return records

    @staticmethod
    def parse_line(
        line: str, delimiter: str = FIELD_DELIMITER, timestamp_format: str = TIMESTAMP_FORMAT
    ) -> LogRecord:
        """Convert one raw line into a LogRecord. Raises ValueError on malformed input."""
        fields = strip_line_ending(line).split(delimiter, FIELD_COUNT - 1)
        if len(fields) != FIELD_COUNT:
            raise ValueError(f"Expected {FIELD_COUNT} fields separated by '{delimiter}', got {len(fields)}")

        timestamp_field, severity_field, message = fields
        return LogRecord(
            timestamp=parse_timestamp(timestamp_field, timestamp_format),
            severity=parse_severity(severity_field),
            message=message,
        )
