"""
Analyze the Anscombe Quartet.

Usage:
    python -m anscombe

Prints the regression statistics of each dataset and writes
anscombe_<name>.png for each into the current directory.
"""

import sys

from anscombe.pipeline import run_quartet
from anscombe.report import print_report


def main() -> int:
    """Run the quartet; exit status 1 if any dataset's statistics failed."""
    outcomes = run_quartet(output_dir='.')
    print_report(outcomes)
    return 0 if all(o.ok for o in outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
