"""
Console report for batch outcomes.

Formats each dataset's statistics to four decimals, followed by the
elapsed backend time and the bytes it allocated.
"""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from anscombe.pipeline import DatasetOutcome

LABEL_WIDTH = 19


def _line(label: str, value: str) -> str:
    return f"  {label:<{LABEL_WIDTH}} : {value}"


def format_outcome(outcome: DatasetOutcome) -> str:
    """
    Render one outcome as a block of text.

    Example:
        Analyzing Dataset I
          Slope               : 0.5001
          Intercept           : 3.0001
          ...
          Plot saved to anscombe_I.png
    """
    lines = [f"Analyzing Dataset {outcome.name}"]

    if outcome.solution is None:
        lines.append(f"  Error: {outcome.error}")
        return "\n".join(lines)

    sol = outcome.solution
    lines.extend([
        _line("Slope", f"{sol.slope:.4f}"),
        _line("Intercept", f"{sol.intercept:.4f}"),
        _line("R-squared", f"{sol.r_squared:.4f}"),
        _line("Residual Std. Error", f"{sol.residual_std_error:.4f}"),
        _line("F-statistic", f"{sol.f_statistic:.4f}"),
        _line("Time (ms)", f"{sol.elapsed_ms:.4f}"),
        _line("Memory (bytes)", f"{sol.memory_bytes:d}"),
    ])

    if outcome.plot_path is not None:
        lines.append(f"  Plot saved to {outcome.plot_path}")
    elif outcome.render_error is not None:
        lines.append(f"  Plot failed: {outcome.render_error}")

    return "\n".join(lines)


def print_report(outcomes: Iterable[DatasetOutcome], file: TextIO | None = None) -> None:
    """Print every outcome, each preceded by a blank line."""
    out = file if file is not None else sys.stdout
    for outcome in outcomes:
        print(file=out)
        print(format_outcome(outcome), file=out)
