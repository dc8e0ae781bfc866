"""
CIELAB, computed from D50-referenced XYZ.
https://www.w3.org/TR/css-color-4/#color-conversion-code
"""

import re
from typing import Any, Mapping, Optional

from ..helpers import alpha_digits, clamp, format_number, is_present, round_digits, to_number
from ..types import LabaColor, RgbaColor, XyzaColor
from .xyz import D50, rgba_to_xyza, xyza_to_rgba

# CIE constants, https://en.wikipedia.org/wiki/CIELAB_color_space
E = 216 / 24389
K = 24389 / 27


def clamp_laba(laba: LabaColor) -> LabaColor:
    """Clamp LAB axis values as CSS Color 4 allows them."""
    return LabaColor(
        # values above 100 are kept for forward compatibility with HDR
        l=clamp(laba.l, 0, 400),
        # a and b are signed and unbounded, in practice within +/-160
        a=laba.a,
        b=laba.b,
        alpha=clamp(laba.alpha),
    )


def round_laba(laba: LabaColor, digits: int = 2) -> LabaColor:
    return LabaColor(
        l=round_digits(laba.l, digits),
        a=round_digits(laba.a, digits),
        b=round_digits(laba.b, digits),
        alpha=round_digits(laba.alpha, alpha_digits(digits)),
    )


def _f(t: float) -> float:
    return t ** (1 / 3) if t > E else (K * t + 16) / 116


def rgba_to_laba(rgba: RgbaColor) -> LabaColor:
    """RGB -> CIE XYZ -> LAB."""
    xyza = rgba_to_xyza(rgba)
    x = _f(xyza.x / D50.x)
    y = _f(xyza.y / D50.y)
    z = _f(xyza.z / D50.z)
    return LabaColor(
        l=116 * y - 16,
        a=500 * (x - y),
        b=200 * (y - z),
        alpha=xyza.a,
    )


def laba_to_rgba(laba: LabaColor) -> RgbaColor:
    """LAB -> CIE XYZ -> RGB."""
    y = (laba.l + 16) / 116
    x = laba.a / 500 + y
    z = y - laba.b / 200
    # products overflow to inf on huge a/b, ** raises OverflowError
    x3 = x * x * x
    z3 = z * z * z
    return xyza_to_rgba(XyzaColor(
        x=(x3 if x3 > E else (116 * x - 16) / K) * D50.x,
        y=(y * y * y if laba.l > K * E else laba.l / K) * D50.y,
        z=(z3 if z3 > E else (116 * z - 16) / K) * D50.z,
        a=laba.alpha,
    ))


def parse_laba(value: Mapping[str, Any]) -> Optional[RgbaColor]:
    """Parse an {l, a, b, alpha} object."""
    l, a, b = value.get("l"), value.get("a"), value.get("b")
    if not is_present(l) or not is_present(a) or not is_present(b):
        return None
    laba = clamp_laba(LabaColor(l=to_number(l), a=to_number(a), b=to_number(b), alpha=to_number(value.get("alpha", 1))))
    return laba_to_rgba(laba)


# LAB strings -----------------------------------------------------

LABA_RE = re.compile(
    r"^lab\(\s*([+-]?\d*\.?\d+)%?\s+([+-]?\d*\.?\d+)\s+([+-]?\d*\.?\d+)\s*(?:/\s*([+-]?\d*\.?\d+)(%)?\s*)?\)$",
    re.IGNORECASE,
)


def parse_laba_string(s: str) -> Optional[RgbaColor]:
    """Parse a lab() string to RGBA."""
    m = LABA_RE.fullmatch(s)
    if not m:
        return None
    l, a, b, alpha, alpha_pct = m.groups()
    laba = clamp_laba(LabaColor(
        l=float(l),
        a=float(a),
        b=float(b),
        alpha=1 if alpha is None else float(alpha) / (100 if alpha_pct else 1),
    ))
    return laba_to_rgba(laba)


def rgba_to_laba_string(rgba: RgbaColor, digits: int = 2) -> str:
    """Convert RGBA to a lab() string."""
    laba = round_laba(rgba_to_laba(rgba), digits)
    l, a, b = format_number(laba.l), format_number(laba.a), format_number(laba.b)
    if laba.alpha < 1:
        return f"lab({l}% {a} {b} / {format_number(laba.alpha)})"
    return f"lab({l}% {a} {b})"
