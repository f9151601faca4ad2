"""Thread-count heuristics."""

import os
from typing import Optional

_MAX_THREADS = 32


def _available_parallelism() -> Optional[int]:
    process_cpu_count = getattr(os, "process_cpu_count", None)
    if process_cpu_count is not None:
        return process_cpu_count()
    sched_getaffinity = getattr(os, "sched_getaffinity", None)
    if sched_getaffinity is not None:
        try:
            return len(sched_getaffinity(0))
        except OSError:
            pass
    return os.cpu_count()


def default_num_threads() -> int:
    """Number of threads to use by default.

    Uses the available parallelism, falling back to 1 when it cannot be
    determined, and never more than 32 to limit startup overhead.
    """
    available = _available_parallelism() or 1
    return min(max(available, 1), _MAX_THREADS)