"""
Core protocols for anscombe.

We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to look like a backend.
"""

from typing import Protocol, TypeVar, runtime_checkable

from anscombe.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter payload
    wrapped in a Result. Backends are stateless; all inputs arrive via the
    design, which makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_closed_form'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the statistical computation.

        Raises:
            NumericalError: If the design is degenerate for this computation
            ValidationError: If the design is invalid for this backend
        """
        ...
