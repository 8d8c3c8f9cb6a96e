"""
Rendering of solution values.

Floats coming out of elimination are turned back into the form a person
would have typed: integers when they are within ZERO_TOLERANCE of one,
otherwise the closest fraction with a bounded denominator. Numerator and
denominator are digit-grouped ("1,234/5").
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Iterable

from pylinsys.core.compute.tolerances import ZERO_TOLERANCE, MAX_DENOMINATOR
from pylinsys.core.exceptions import ValidationError


def group_digits(n: int, separator: str = ',') -> str:
    """
    Insert ``separator`` every three digits from the right.

    >>> group_digits(-1234567)
    '-1,234,567'
    """
    return f"{int(n):,}".replace(',', separator)


def to_fraction(
    value: float,
    *,
    tolerance: float = ZERO_TOLERANCE,
    max_denominator: int = MAX_DENOMINATOR,
) -> Fraction:
    """
    Best rational reading of a float.

    Parameters
    ----------
    value : float
        Finite value to convert.
    tolerance : float
        Values this close to an integer snap to it.
    max_denominator : int
        Upper bound on the denominator of non-integer results.

    Returns
    -------
    Fraction
        In lowest terms.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"value: cannot format non-finite value {value!r}")

    nearest = round(value)
    if abs(value - nearest) <= tolerance:
        return Fraction(int(nearest))
    return Fraction(value).limit_denominator(max_denominator)


def format_value(
    value: float,
    *,
    separator: str = ',',
    tolerance: float = ZERO_TOLERANCE,
    max_denominator: int = MAX_DENOMINATOR,
) -> str:
    """
    Format one solution component as a grouped integer or fraction.

    ``2.9999999999`` renders as ``"3"``, ``0.5`` as ``"1/2"`` and
    ``-1234.5`` as ``"-2,469/2"``.
    """
    exact = to_fraction(value, tolerance=tolerance, max_denominator=max_denominator)
    numerator = group_digits(exact.numerator, separator)
    if exact.denominator == 1:
        return numerator
    return f"{numerator}/{group_digits(exact.denominator, separator)}"


def exact_text(
    value: float,
    *,
    tolerance: float = ZERO_TOLERANCE,
    max_denominator: int = MAX_DENOMINATOR,
) -> str:
    """Like format_value but ungrouped, so the parser accepts it back."""
    return format_value(
        value,
        separator='',
        tolerance=tolerance,
        max_denominator=max_denominator,
    )


def format_values(values: Iterable[float], **kwargs) -> tuple[str, ...]:
    """format_value over a whole solution vector."""
    return tuple(format_value(v, **kwargs) for v in values)
