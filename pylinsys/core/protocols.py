"""
Core protocols for PyLinSys.

These define structural interfaces that domain-specific implementations
must satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so alternative backends need no common base class.
"""

from typing import Protocol, TypeVar, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design and produce
    a domain-specific parameter payload.

    Backends are stateless: all configuration is passed at construction
    time, so one instance may serve any number of solves.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_gauss', 'cpu_lstsq'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated, domain-specific input

        Returns:
            Result envelope containing parameter payload and metadata.
            Degenerate outcomes (no solution, infinitely many) are encoded
            in the payload, not raised.
        """
        ...
