"""
Memory accounting for backend computations.

Reports the change in Python-allocated bytes across a computation, the
counterpart of the wall-clock Timer. Built on tracemalloc, which only sees
allocations made while tracing is active, so the tracker starts tracing
itself when nobody else has.
"""

import tracemalloc
from contextlib import contextmanager
from typing import Iterator


class MemoryTracker:
    """
    Allocated-bytes delta between start() and stop().

    Usage:
        tracker = MemoryTracker()
        tracker.start()
        slope, intercept = fit(x, y)
        tracker.stop()
        tracker.result()
        # {'memory_bytes': 1184, 'peak_bytes': 2368}

    memory_bytes is clamped at zero: a computation that frees more than it
    allocates reports no growth rather than a negative number.

    The tracemalloc peak is process-wide. The tracker only resets it when
    it started tracing itself; if tracing was already on, the outside
    peak is left alone and 'peak_bytes' is omitted from result().
    """

    def __init__(self):
        self._owns_tracing = False
        self._start_bytes: int | None = None
        self._delta: int | None = None
        self._peak: int | None = None

    def start(self) -> None:
        """Begin tracking, enabling tracemalloc if it is not already on."""
        if not tracemalloc.is_tracing():
            tracemalloc.start()
            self._owns_tracing = True
            tracemalloc.reset_peak()
        self._start_bytes, _ = tracemalloc.get_traced_memory()

    def stop(self) -> None:
        """Stop tracking and record the delta."""
        if self._start_bytes is None:
            raise RuntimeError("MemoryTracker.stop() called before start()")
        current, peak = tracemalloc.get_traced_memory()
        self._delta = max(current - self._start_bytes, 0)
        if self._owns_tracing:
            self._peak = max(peak - self._start_bytes, 0)
            tracemalloc.stop()
            self._owns_tracing = False
        else:
            self._peak = None

    def result(self) -> dict[str, int]:
        """
        Get memory results.

        Returns:
            Dictionary with 'memory_bytes', plus 'peak_bytes' when the
            tracker owned tracing

        Raises:
            RuntimeError: If called before stop()
        """
        if self._delta is None:
            raise RuntimeError("MemoryTracker.result() called before stop()")
        result = {'memory_bytes': self._delta}
        if self._peak is not None:
            result['peak_bytes'] = self._peak
        return result


@contextmanager
def tracked() -> Iterator[MemoryTracker]:
    """
    Context manager for simple memory tracking.

    Usage:
        with tracked() as tracker:
            result = expensive_computation()
        print(f"Allocated {tracker.result()['memory_bytes']} bytes")
    """
    tracker = MemoryTracker()
    tracker.start()
    try:
        yield tracker
    finally:
        tracker.stop()
