"""
Shared compute infrastructure for anscombe.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared instrumentation.

Submodules:
    timing: Wall-clock timing utilities
    memory: Allocated-bytes tracking
"""

from anscombe.core.compute.timing import Timer, timed
from anscombe.core.compute.memory import MemoryTracker, tracked

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Memory
    "MemoryTracker",
    "tracked",
]
