"""
Tolerance constants for numerical decisions.

Every "treat as zero" decision in the package reads ZERO_TOLERANCE from
here: pivot selection, zero-row detection, free-variable detection and
integer snapping in the formatter. Do not inline the literal elsewhere.

Magnitudes ``<= ZERO_TOLERANCE`` are zero; magnitudes above it are not.

VERIFY_TOLERANCE is the looser bound used when a solution is substituted
back into the original equations.
"""

# Magnitudes at or below this are zero for elimination and formatting
ZERO_TOLERANCE: float = 1e-10

# Max |Ax - b| accepted before a solution is flagged
VERIFY_TOLERANCE: float = 1e-9

# Largest denominator tried when turning a float back into a fraction
MAX_DENOMINATOR: int = 10_000_000
