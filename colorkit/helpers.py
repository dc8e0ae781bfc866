"""
Numeric primitives shared by every color model.
"""

import math
from numbers import Real
from typing import Any

# Alpha is never rounded to fewer digits than this
ALPHA_PRECISION = 3

# Most fractional digits a formatted channel keeps
FORMAT_DIGITS = 10

# Valid CSS <angle> units, as degrees per unit
ANGLE_UNITS = {
    "grad": 360 / 400,
    "turn": 360,
    "rad": 360 / (math.pi * 2),
}


def is_present(value: Any) -> bool:
    """Check that an object channel holds something worth parsing."""
    if isinstance(value, str):
        return len(value) > 0
    if isinstance(value, bool):
        return False
    return isinstance(value, Real)


def to_number(value: Any) -> float:
    """Convert a channel to float, NaN when it can't be read as a number."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def round_digits(number: float, digits: int = 0) -> float:
    """Round half up to the given number of digits."""
    if not math.isfinite(number):
        return number
    base = 10 ** digits
    return math.floor(base * number + 0.5) / base + 0.0


def floor_digits(number: float, digits: int = 0) -> float:
    """Floor to the given number of digits."""
    if not math.isfinite(number):
        return number
    base = 10 ** digits
    return math.floor(base * number) / base + 0.0


def clamp(number: float, min: float = 0, max: float = 1) -> float:
    """
    Clamp a value between an upper and lower bound.
    NaN fails both comparisons and lands on the lower bound.
    """
    return max if number > max else number if number > min else min


def clamp_hue(degrees: float) -> float:
    """Wrap an angle into [0, 360); NaN and infinities become 0."""
    if not math.isfinite(degrees):
        return 0.0
    degrees = degrees % 360
    # tiny negatives wrap to exactly 360.0 in floating point
    return degrees if degrees < 360 else 0.0


def parse_hue(value: Any, unit: str = "deg") -> float:
    """Convert a hue with an optional CSS angle unit to degrees."""
    factor = ANGLE_UNITS.get((unit or "deg").lower(), 1)
    return to_number(value) * factor


def alpha_digits(digits: int) -> int:
    """Digits used to round alpha for a given channel precision."""
    return ALPHA_PRECISION if ALPHA_PRECISION > digits else digits


def format_number(value: float) -> str:
    """Render a rounded channel the way CSS strings expect it, never in exponent form."""
    if float(value).is_integer():
        return str(int(value))
    text = f"{value:.{FORMAT_DIGITS}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
