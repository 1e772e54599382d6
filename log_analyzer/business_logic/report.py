import os
from pathlib import Path

from log_analyzer.utils.constants import REPORT_FILE_PATH, REPORT_TEMPLATE
from log_analyzer.utils.logger import setup_logger


class ReportWriter:
    """Writes the single-line analysis summary, replacing any previous report."""

    def __init__(self, output_path: str | Path = REPORT_FILE_PATH, template: str = REPORT_TEMPLATE):
        self.output_path: Path = Path(output_path)
        self.template: str = template
        self.logger = setup_logger(os.path.basename(__file__))

    def render(self, count: int) -> str:
        return self.template.format(count=count)

    def write(self, count: int) -> Path:
        try:
            with open(self.output_path, "w", encoding="utf-8") as f:
                f.write(self.render(count))
        except OSError as e:
            self.logger.error(f"Failed to write report '{self.output_path}': {e}")
            raise
        self.logger.info(f"Report written to {self.output_path}")
        return self.output_path
