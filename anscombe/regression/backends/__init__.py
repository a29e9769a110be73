"""
Regression backends.

Available backends:
    CPUClosedFormBackend: CPU reference implementation of the closed-form fit
"""

from anscombe.regression.backends.cpu import CPUClosedFormBackend

__all__ = [
    "CPUClosedFormBackend",
]
