"""A worker thread completing jobs while the caller waits for them."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


@dataclass
class JobStatus:
    """A count of completed jobs, safe to share between threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def complete_job(self) -> int:
        """Record one finished job and return the new count."""
        with self._lock:
            self.jobs_completed += 1
            return self.jobs_completed


def run_jobs(jobs: int = 10, job_interval: float = 0.25, poll_interval: float = 0.5) -> int:
    """Complete jobs on a worker thread, printing while waiting; return how often it waited."""
    if jobs < 0:
        raise ValueError("jobs must not be negative")
    status = JobStatus()

    def work() -> None:
        for _ in range(jobs):
            time.sleep(job_interval)
            status.complete_job()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    waits = 0
    while status.jobs_completed < jobs:
        print("waiting... ")
        waits += 1
        time.sleep(poll_interval)
    worker.join()
    return waits