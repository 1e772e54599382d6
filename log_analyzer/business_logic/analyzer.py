"""End-to-end log analysis: ingest, filter, process concurrently, report."""

import os
from dataclasses import dataclass
from pathlib import Path

from log_analyzer.business_logic.filters import filter_by_severity
from log_analyzer.business_logic.models import Severity
from log_analyzer.business_logic.parallel import ParallelProcessor
from log_analyzer.business_logic.parser import Parser
from log_analyzer.business_logic.report import ReportWriter
from log_analyzer.utils.constants import (FIELD_DELIMITER, INPUT_FILE_PATH, MAX_WORKERS, PROCESSING_DELAY_MS,
                                          REPORT_FILE_PATH, SHUTDOWN_TIMEOUT_SECONDS, TARGET_SEVERITY,
                                          TIMESTAMP_FORMAT)
from log_analyzer.utils.helpers import parse_severity
from log_analyzer.utils.logger import setup_logger


@dataclass(frozen=True)
class AnalysisResult:
    total_records: int
    skipped_lines: int
    target_records: int
    processed: int
    report_path: Path


class LogAnalyzer:
    """
    Runs the whole pipeline for one input file.
    The worker pool is shut down before the report is written, and nothing is written
    when the input file cannot be read.
    """

    def __init__(
        self,
        input_path: str = INPUT_FILE_PATH,
        output_path: str | Path = REPORT_FILE_PATH,
        max_workers: int = MAX_WORKERS,
        target_severity: str | Severity = TARGET_SEVERITY,
        delay_ms: float = PROCESSING_DELAY_MS,
        delimiter: str = FIELD_DELIMITER,
        timestamp_format: str = TIMESTAMP_FORMAT,
        shutdown_timeout: float = SHUTDOWN_TIMEOUT_SECONDS,
    ):
        self.input_path: str = str(input_path)
        self.target_severity: Severity = parse_severity(target_severity)
        self.delimiter: str = delimiter
        self.timestamp_format: str = timestamp_format
        self.processor = ParallelProcessor(max_workers=max_workers, delay_ms=delay_ms, shutdown_timeout=shutdown_timeout)
        self.report_writer = ReportWriter(output_path)
        self.logger = setup_logger(os.path.basename(__file__))

    def run(self) -> AnalysisResult:
        with Parser(self.input_path, delimiter=self.delimiter, timestamp_format=self.timestamp_format) as parser:
            records = parser.get_all_records()
            skipped_lines = parser.skipped_lines

        targets = filter_by_severity(records, self.target_severity)
        self.logger.info(f"{len(targets):,} of {len(records):,} records at severity {self.target_severity.value}")

        processed = self.processor.process(targets)
        report_path = self.report_writer.write(processed)

        return AnalysisResult(
            total_records=len(records),
            skipped_lines=skipped_lines,
            target_records=len(targets),
            processed=processed,
            report_path=report_path,
        )
