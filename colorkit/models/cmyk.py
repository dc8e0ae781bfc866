"""
CMYK, the subtractive print model.
https://www.w3.org/TR/css-color-4/#device-cmyk
"""

import math
import re
from typing import Any, Mapping, Optional

from ..helpers import alpha_digits, clamp, format_number, is_present, round_digits, to_number
from ..types import CmykaColor, RgbaColor


def clamp_cmyka(cmyka: CmykaColor) -> CmykaColor:
    return CmykaColor(
        c=clamp(cmyka.c, 0, 100),
        m=clamp(cmyka.m, 0, 100),
        y=clamp(cmyka.y, 0, 100),
        k=clamp(cmyka.k, 0, 100),
        a=clamp(cmyka.a),
    )


def round_cmyka(cmyka: CmykaColor, digits: int = 2) -> CmykaColor:
    return CmykaColor(
        c=round_digits(cmyka.c, digits),
        m=round_digits(cmyka.m, digits),
        y=round_digits(cmyka.y, digits),
        k=round_digits(cmyka.k, digits),
        a=round_digits(cmyka.a, alpha_digits(digits)),
    )


def cmyka_to_rgba(cmyka: CmykaColor) -> RgbaColor:
    """https://www.rapidtables.com/convert/color/cmyk-to-rgb.html"""
    key = 1 - cmyka.k / 100
    return RgbaColor(
        r=round_digits(255 * (1 - cmyka.c / 100) * key),
        g=round_digits(255 * (1 - cmyka.m / 100) * key),
        b=round_digits(255 * (1 - cmyka.y / 100) * key),
        a=cmyka.a,
    )


def _ink(channel: float, k: float) -> float:
    # pure black leaves no room for any ink but K: 0/0
    try:
        value = (1 - channel / 255 - k) / (1 - k)
    except ZeroDivisionError:
        return 0
    return 0 if math.isnan(value) else round_digits(value * 100)


def rgba_to_cmyka(rgba: RgbaColor) -> CmykaColor:
    """https://www.rapidtables.com/convert/color/rgb-to-cmyk.html"""
    k = 1 - max(rgba.r / 255, rgba.g / 255, rgba.b / 255)
    return CmykaColor(
        c=_ink(rgba.r, k),
        m=_ink(rgba.g, k),
        y=_ink(rgba.b, k),
        k=round_digits(k * 100),
        a=rgba.a,
    )


def parse_cmyka(value: Mapping[str, Any]) -> Optional[RgbaColor]:
    """Parse a {c, m, y, k, a} object."""
    channels = [value.get(key) for key in "cmyk"]
    if not all(is_present(channel) for channel in channels):
        return None
    c, m, y, k = (to_number(channel) for channel in channels)
    return cmyka_to_rgba(clamp_cmyka(CmykaColor(c=c, m=m, y=y, k=k, a=to_number(value.get("a", 1)))))


# CMYK strings ----------------------------------------------------

num = r"([+-]?\d*\.?\d+)"

CMYKA_RE = re.compile(
    f"^device-cmyk\\(\\s*{num}(%)?\\s+{num}(%)?\\s+{num}(%)?\\s+{num}(%)?\\s*(?:/\\s*{num}(%)?\\s*)?\\)$",
    re.IGNORECASE,
)


def parse_cmyka_string(s: str) -> Optional[RgbaColor]:
    """Parse a device-cmyk() string. Bare numbers are fractions of 1."""
    m = CMYKA_RE.fullmatch(s)
    if not m:
        return None
    groups = m.groups()

    def channel(index: int) -> float:
        return float(groups[index]) * (1 if groups[index + 1] else 100)

    a, a_pct = groups[8], groups[9]
    cmyka = clamp_cmyka(CmykaColor(
        c=channel(0),
        m=channel(2),
        y=channel(4),
        k=channel(6),
        a=1 if a is None else float(a) / (100 if a_pct else 1),
    ))
    return cmyka_to_rgba(cmyka)


def rgba_to_cmyka_string(rgba: RgbaColor, digits: int = 2) -> str:
    """Convert RGBA to a device-cmyk() string."""
    cmyka = round_cmyka(rgba_to_cmyka(rgba), digits)
    c, m, y, k = (format_number(v) for v in (cmyka.c, cmyka.m, cmyka.y, cmyka.k))
    if cmyka.a < 1:
        return f"device-cmyk({c}% {m}% {y}% {k}% / {format_number(cmyka.a)})"
    return f"device-cmyk({c}% {m}% {y}% {k}%)"
