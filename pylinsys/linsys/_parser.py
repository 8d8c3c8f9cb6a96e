"""
Cell text parsing.

Turns the free-form text of one grid cell into an exact rational value.
Accepted forms (surrounding whitespace ignored):

    integer / decimal   3   -2.5   +.5   4.
    fraction            1/2   -7/3
    repeating decimal   0.(3)   1.2(34)   -.(6)

Blank text is not an error: it parses to "no value", which the solver
reads as zero. Everything else raises ParseError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from fractions import Fraction

from pylinsys.core.exceptions import ParseError


_FRACTION = re.compile(r'(?P<sign>[+-]?)(?P<num>\d+)/(?P<den>\d+)')
_DECIMAL = re.compile(r'(?P<sign>[+-]?)(?P<int>\d*)(?:\.(?P<frac>\d*))?')
_REPEATING = re.compile(r'(?P<sign>[+-]?)(?P<int>\d*)\.(?P<frac>\d*)\((?P<rep>\d+)\)')


def parse_number(text: str, role: str = 'coefficient') -> Fraction:
    """
    Parse non-blank cell text into an exact Fraction.

    Parameters
    ----------
    text : str
        Raw cell text.
    role : str
        'coefficient' or 'constant'; only used in the error message.

    Returns
    -------
    Fraction
        Exact value of the text.

    Raises
    ------
    ParseError
        If the text is blank, malformed, a fraction with denominator 0, or
        a number too long to convert or too large for a float.
    """
    try:
        value = _parse_exact(text.strip())
        if value is not None:
            float(value)
    except (ValueError, OverflowError):
        # int() digit limit, or magnitude beyond the float range
        raise ParseError.for_cell(text, role) from None
    if value is None:
        raise ParseError.for_cell(text, role)
    return value


def _parse_exact(s: str) -> Fraction | None:
    m = _FRACTION.fullmatch(s)
    if m:
        den = int(m['den'])
        if den == 0:
            return None
        value = Fraction(int(m['num']), den)
        return -value if m['sign'] == '-' else value

    m = _REPEATING.fullmatch(s)
    if m:
        return _repeating_value(m)

    m = _DECIMAL.fullmatch(s)
    if m and (m['int'] or m['frac']):
        value = Fraction(int(m['int'] or '0'))
        if m['frac']:
            value += Fraction(int(m['frac']), 10 ** len(m['frac']))
        return -value if m['sign'] == '-' else value

    return None


def _repeating_value(m: re.Match) -> Fraction:
    # x = I.F(R)  =>  x = I + F / 10^k + R / ((10^r - 1) * 10^k)
    k = len(m['frac'])
    r = len(m['rep'])
    value = Fraction(int(m['int'] or '0'))
    if k:
        value += Fraction(int(m['frac']), 10 ** k)
    value += Fraction(int(m['rep']), (10 ** r - 1) * 10 ** k)
    return -value if m['sign'] == '-' else value


@dataclass(frozen=True)
class Coefficient:
    """
    One grid cell: raw text plus its parsed value.

    ``value`` is None when the text is blank or unparsable. The two cases
    are told apart with ``is_blank``: blank cells count as zero, while
    unparsable ones must be reported before solving.
    """
    text: str = ''
    value: Fraction | None = None

    @classmethod
    def from_text(cls, text: str | None) -> Coefficient:
        """Parse ``text`` without raising; failures leave ``value`` as None."""
        text = '' if text is None else str(text)
        if not text.strip():
            return cls(text=text, value=None)
        try:
            return cls(text=text, value=parse_number(text))
        except ParseError:
            return cls(text=text, value=None)

    @classmethod
    def from_value(cls, value) -> Coefficient:
        """Wrap an already-numeric value, keeping a textual form of it."""
        exact = value if isinstance(value, Fraction) else Fraction(value)
        return cls(text=str(value), value=exact)

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    @property
    def is_valid(self) -> bool:
        """Blank, or parsed successfully."""
        return self.value is not None or self.is_blank

    def as_float(self) -> float:
        """Numeric value for the solver; blank cells are 0.0."""
        if self.value is None:
            if self.is_blank:
                return 0.0
            raise ParseError.for_cell(self.text)
        return float(self.value)
