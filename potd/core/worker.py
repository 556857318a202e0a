"""
Worker module for the POTD generator.

This module fans a long date range out over worker processes. Every worker
receives the raw key bytes and a contiguous batch of dates; batches are
collected in submission order so the result keeps calendar order.
"""

import logging
import multiprocessing
from typing import Callable, List, Optional, Tuple

from potd.core.dates import CalendarDate, date_range
from potd.core.engine import PotdRecord, compute_password
from potd.core.seed import derive_key

DEFAULT_CHUNK_SIZE = 256

Batch = Tuple[bytes, List[CalendarDate]]


def worker_process(batch: Batch) -> List[Tuple[CalendarDate, str]]:
    """Compute passwords for one batch of dates

    Args:
        batch: Raw key bytes and the dates to process

    Returns:
        (date, password) pairs in the order the dates were given
    """
    key, dates = batch
    return [(date, compute_password(key, date)[0]) for date in dates]


def default_processes() -> int:
    """CPU count - 1, at least one"""
    return max(1, multiprocessing.cpu_count() - 1)


class ParallelRangeRunner:
    """Generates passwords for a date range across several processes"""

    def __init__(self, seed: str, processes: Optional[int] = None,
                 chunk_size: Optional[int] = None, logger=None):
        """Initialize with seed, process count and batch size

        Args:
            seed: Seed string; validated immediately
            processes: Number of processes to use (default: CPU count - 1)
            chunk_size: Dates per batch handed to one worker
            logger: Optional logger instance
        """
        self.key = derive_key(seed)
        self.processes = default_processes() if processes is None else processes
        if self.processes < 1:
            raise ValueError("processes must be at least 1")
        self.chunk_size = DEFAULT_CHUNK_SIZE if chunk_size is None else chunk_size
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        self.logger = logger or logging.getLogger(__name__)

    def _batches(self, start: CalendarDate, end: CalendarDate):
        batch = []
        for day in date_range(start, end):
            batch.append(day)
            if len(batch) == self.chunk_size:
                yield self.key.data, batch
                batch = []
        if batch:
            yield self.key.data, batch

    def run(self, start: CalendarDate, end: CalendarDate,
            progress_callback: Optional[Callable[[int], None]] = None) -> List[PotdRecord]:
        """Generate records for every date from start to end inclusive

        Args:
            start: First date
            end: Last date
            progress_callback: Called with the number of dates finished per batch

        Returns:
            Records in calendar order

        Raises:
            InvalidRangeError: start is after end
        """
        # Raises before any process is started
        total = len(date_range(start, end))
        batches = self._batches(start, end)

        records = []
        if self.processes == 1 or total <= self.chunk_size:
            self.logger.debug("Generating %d passwords in-process", total)
            for batch in batches:
                records.extend(self._collect(worker_process(batch), progress_callback))
            return records

        self.logger.info(f"Using {self.processes} processes for {total:,} dates")
        with multiprocessing.Pool(self.processes) as pool:
            for result in pool.imap(worker_process, batches):
                records.extend(self._collect(result, progress_callback))
        return records

    @staticmethod
    def _collect(result, progress_callback) -> List[PotdRecord]:
        if progress_callback:
            progress_callback(len(result))
        return [PotdRecord(date, password) for date, password in result]


def generate_parallel(seed: str, start: CalendarDate, end: CalendarDate,
                      processes: Optional[int] = None,
                      chunk_size: Optional[int] = None) -> List[PotdRecord]:
    """Generate passwords for a date range using worker processes"""
    return ParallelRangeRunner(seed, processes, chunk_size).run(start, end)
