"""Concurrent processing of filtered log records on a bounded thread pool."""

import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Iterable, List

from log_analyzer.business_logic.models import LogRecord
from log_analyzer.utils.constants import MAX_WORKERS, PROCESSING_DELAY_MS, SHUTDOWN_TIMEOUT_SECONDS
from log_analyzer.utils.logger import setup_logger


class AtomicCounter:
    """Integer counter whose increment is safe across threads."""

    def __init__(self, initial: int = 0):
        self._value: int = initial
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class ParallelProcessor:
    """
    Processes log records with a fixed-size ThreadPoolExecutor.
    Every record is one work unit: a simulated analysis delay followed by a counter increment.
    The pool is always shut down before process() returns.
    """

    def __init__(
        self,
        max_workers: int = MAX_WORKERS,
        delay_ms: float = PROCESSING_DELAY_MS,
        shutdown_timeout: float = SHUTDOWN_TIMEOUT_SECONDS,
    ):
        """Initialize the ParallelProcessor."""
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")

        self.max_workers: int = max_workers
        self.delay_seconds: float = delay_ms / 1000.0
        self.shutdown_timeout: float = shutdown_timeout
        self.counter: AtomicCounter = AtomicCounter()
        self.logger = setup_logger(os.path.basename(__file__))
        self._stop_event = threading.Event()

    def interrupt(self) -> None:
        """
        Abort every waiting or queued work unit without counting it.
        A call made before process() starts applies to that next run. The signal is reset once the run ends.
        """
        self._stop_event.set()

    def process(self, records: Iterable[LogRecord]) -> int:
        """Process every record exactly once and return the number of completed units."""
        records = list(records)
        self.counter = AtomicCounter()

        if not records:
            self.logger.info("No records to process.")
            self._stop_event.clear()
            return 0

        self.logger.info(f"Processing {len(records):,} records with {self.max_workers} workers...")

        executor = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="log-worker")
        futures: List[Future] = []
        try:
            futures = [executor.submit(self._process_record, record, self.counter) for record in records]
            wait(futures)
            for future in futures:
                future.result()
        except KeyboardInterrupt:
            self.logger.warning("Interrupted. Stopping workers...")
            self.interrupt()
            raise
        except Exception as e:
            self.logger.error(f"Error in parallel processing: {e}")
            raise RuntimeError(f"Error in parallel processing: {e}") from e
        finally:
            self._shutdown(executor, futures)
            self._stop_event.clear()

        self.logger.info(f"Total records processed: {self.counter.value:,}")
        return self.counter.value

    def _process_record(self, record: LogRecord, counter: AtomicCounter) -> bool:
        """Simulate an expensive analysis of one record. Returns False when interrupted."""
        if self._stop_event.wait(self.delay_seconds):
            self.logger.debug(f"Work unit interrupted: {record}")
            return False
        counter.increment()
        return True

    def _shutdown(self, executor: ThreadPoolExecutor, futures: List[Future]) -> None:
        """Wait for outstanding units up to the shutdown timeout, then release the worker threads."""
        _, not_done = wait(futures, timeout=self.shutdown_timeout)
        if not_done:
            self.logger.warning(f"{len(not_done)} work units still running after {self.shutdown_timeout}s. Interrupting them.")
            self.interrupt()
        executor.shutdown(wait=not not_done, cancel_futures=True)
        self.logger.debug("Worker pool shut down.")
