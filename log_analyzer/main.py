"""Main entry point for the log analyzer."""
import argparse
import sys
from typing import List, Optional

from log_analyzer.business_logic.analyzer import LogAnalyzer
from log_analyzer.business_logic.models import Severity
from log_analyzer.utils.constants import (INPUT_FILE_PATH, MAX_WORKERS, PROCESSING_DELAY_MS, REPORT_FILE_PATH,
                                          TARGET_SEVERITY)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Concurrent log analyzer: counts the records at a target severity")
    parser.add_argument("--input", default=INPUT_FILE_PATH, help="log file to analyze")
    parser.add_argument("--output", default=REPORT_FILE_PATH, help="report file to write")
    parser.add_argument("--workers", type=int, default=MAX_WORKERS, help="number of worker threads")
    parser.add_argument(
        "--severity", default=TARGET_SEVERITY, choices=[s.name for s in Severity], help="severity to process"
    )
    parser.add_argument("--delay-ms", type=float, default=PROCESSING_DELAY_MS, help="simulated work per record")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    try:
        analyzer = LogAnalyzer(
            input_path=args.input,
            output_path=args.output,
            max_workers=args.workers,
            target_severity=args.severity,
            delay_ms=args.delay_ms,
        )
        result = analyzer.run()
        print(f"\nAnalysis finished: {result.processed:,} {args.severity} records processed -> {result.report_path}")
    except KeyboardInterrupt:
        print("\n\nInterrupted by user. Exiting...")
        sys.exit(0)
    except FileNotFoundError as e:
        print(f"\nError: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"\nFatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
