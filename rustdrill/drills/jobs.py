"""A worker thread completing jobs while the caller waits for them."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


@dataclass
class JobStatus:
    """How many jobs the worker has completed so far."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def _complete_one(self) -> None:
        with self._lock:
            self.jobs_completed += 1

    def _count(self) -> int:
        with self._lock:
            return self.jobs_completed


def run_jobs(
    total: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5
) -> JobStatus:
    """Complete `total` jobs on a worker, printing a line on each poll until done."""
    status = JobStatus()

    def work() -> None:
        for _ in range(total):
            time.sleep(job_delay)
            status._complete_one()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    while status._count() < total:
        print("waiting... ")
        time.sleep(poll_delay)
    worker.join()
    return status