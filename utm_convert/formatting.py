"""
String formatting and parsing helpers for coordinate values.

Provides:
    - to_fixed: fixed-point rendering with a given number of fractional digits
    - format_number: plain rendering of a raw number (no trailing ".0")
    - decimal_degrees_to_dms: "40 42' 46.08\"" style degree/minute/second text
    - parse_numeric_string: strict decimal-number parser

Rounding in to_fixed is half away from zero on the exact binary value of the
float, so 0.125 renders as "0.13" with two digits (Python's own format() would
round half to even and give "0.12").
"""

import logging
import math
import re
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Union

from utm_convert.exceptions import ParseError
from utm_convert.types import Degrees

logger = logging.getLogger(__name__)

# Number of fractional digits used when rendering latitude/longitude text
DEFAULT_FRACTION_DIGITS = 3

MAX_FRACTION_DIGITS = 20

# Wide enough to hold any finite float at MAX_FRACTION_DIGITS without rounding the integer part
_FIXED_CONTEXT = Context(prec=350)

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def to_fixed(value: float, fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
    """Render a number with exactly ``fraction_digits`` digits after the point.

    Args:
        value: Number to render.
        fraction_digits: Digits after the decimal point, 0 to 20.

    Returns:
        Fixed-point string, e.g. to_fixed(40.71284, 3) -> "40.713".

    Raises:
        ValueError: If fraction_digits is out of range.
    """
    if not 0 <= fraction_digits <= MAX_FRACTION_DIGITS:
        raise ValueError(
            f"fraction_digits must be in range [0, {MAX_FRACTION_DIGITS}], got {fraction_digits}"
        )
    if not math.isfinite(value):
        return str(value)
    if value == 0:
        value = 0.0  # render -0.0 without a sign
    quantum = Decimal(1).scaleb(-fraction_digits)
    fixed = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT)
    return f"{fixed:f}"


def format_number(value: Union[int, float]) -> str:
    """Render a raw number the short way: 500000.0 -> "500000", 42.5 -> "42.5"."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def decimal_degrees_to_dms(value: Degrees) -> str:
    """Convert decimal degrees to a degrees, minutes, seconds string.

    The whole degrees are floor(value), so negative input is not mirrored:
    -0.5 becomes "-1 30' 0.00\"" (i.e. -1 degree plus 30 minutes).

    Args:
        value: Angle in decimal degrees.

    Returns:
        String like "40 42' 46.08\"" with seconds to two decimals.

    Example:
        >>> decimal_degrees_to_dms(40.7128)
        '40 42\\' 46.08"'
    """
    degrees = math.floor(value)
    minutes = (value - degrees) * 60
    seconds = (minutes - math.floor(minutes)) * 60
    return f"{degrees} {math.floor(minutes)}' {to_fixed(seconds, 2)}\""


def parse_numeric_string(text: Union[str, int, float]) -> float:
    """Parse a decimal number, ignoring surrounding whitespace.

    Accepts an optional sign, digits with an optional fractional part and an
    optional exponent ("12", " -0.5 ", "1.5e3", ".25"). Numbers that are
    already int/float are rendered with str() first.

    Args:
        text: Text to parse.

    Returns:
        Parsed value as float.

    Raises:
        ParseError: If the stripped text is empty or is not a decimal number
            (this includes "nan", "inf", hex and underscore-grouped digits).
    """
    stripped = str(text).strip()
    if not _DECIMAL_PATTERN.fullmatch(stripped):
        logger.debug("Could not parse %r as a decimal number", text)
        raise ParseError(text)
    return float(stripped)
