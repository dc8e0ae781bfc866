"""
CIELCH, the cylindrical form of CIELAB.
https://lea.verou.me/2020/04/lch-colors-in-css-what-why-and-how/
"""

import math
import re
from typing import Any, Mapping, Optional

from ..helpers import alpha_digits, clamp, clamp_hue, format_number, is_present, parse_hue, round_digits, to_number
from ..types import LabaColor, LchaColor, RgbaColor
from .lab import laba_to_rgba, rgba_to_laba


def clamp_lcha(lcha: LchaColor) -> LchaColor:
    return LchaColor(
        l=clamp(lcha.l, 0, 100),
        c=lcha.c,
        h=clamp_hue(lcha.h),
        a=clamp(lcha.a),
    )


def round_lcha(lcha: LchaColor, digits: int = 2) -> LchaColor:
    return LchaColor(
        l=round_digits(lcha.l, digits),
        c=round_digits(lcha.c, digits),
        h=round_digits(lcha.h, digits),
        a=round_digits(lcha.a, alpha_digits(digits)),
    )


def rgba_to_lcha(rgba: RgbaColor) -> LchaColor:
    """RGB -> CIE XYZ -> CIELAB -> CIELCH."""
    laba = rgba_to_laba(rgba)
    # grays must come out with exactly zero chroma and hue
    a = round_digits(laba.a, 3)
    b = round_digits(laba.b, 3)
    hue = math.degrees(math.atan2(b, a))
    return LchaColor(
        l=laba.l,
        c=math.sqrt(a * a + b * b),
        h=hue + 360 if hue < 0 else hue,
        a=laba.alpha,
    )


def lcha_to_rgba(lcha: LchaColor) -> RgbaColor:
    """CIELCH -> CIELAB -> CIE XYZ -> RGB."""
    return laba_to_rgba(LabaColor(
        l=lcha.l,
        a=lcha.c * math.cos(math.radians(lcha.h)),
        b=lcha.c * math.sin(math.radians(lcha.h)),
        alpha=lcha.a,
    ))


def parse_lcha(value: Mapping[str, Any]) -> Optional[RgbaColor]:
    """Parse an {l, c, h, a} object."""
    l, c, h = value.get("l"), value.get("c"), value.get("h")
    if not is_present(l) or not is_present(c) or not is_present(h):
        return None
    lcha = clamp_lcha(LchaColor(l=to_number(l), c=to_number(c), h=to_number(h), a=to_number(value.get("a", 1))))
    return lcha_to_rgba(lcha)


# LCH strings -----------------------------------------------------

# lch( <percentage> <number> <hue> [ / <alpha-value> ]? )
LCHA_RE = re.compile(
    r"^lch\(\s*([+-]?\d*\.?\d+)%\s+([+-]?\d*\.?\d+)\s+([+-]?\d*\.?\d+)(deg|rad|grad|turn)?\s*(?:/\s*([+-]?\d*\.?\d+)(%)?\s*)?\)$",
    re.IGNORECASE,
)


def parse_lcha_string(s: str) -> Optional[RgbaColor]:
    """Parse an lch() string to RGBA."""
    m = LCHA_RE.fullmatch(s)
    if not m:
        return None
    l, c, h, unit, a, a_pct = m.groups()
    lcha = clamp_lcha(LchaColor(
        l=float(l),
        c=float(c),
        h=parse_hue(h, unit),
        a=1 if a is None else float(a) / (100 if a_pct else 1),
    ))
    return lcha_to_rgba(lcha)


def rgba_to_lcha_string(rgba: RgbaColor, digits: int = 2) -> str:
    """Convert RGBA to an lch() string."""
    lcha = round_lcha(rgba_to_lcha(rgba), digits)
    l, c, h = format_number(lcha.l), format_number(lcha.c), format_number(lcha.h)
    if lcha.a < 1:
        return f"lch({l}% {c} {h} / {format_number(lcha.a)})"
    return f"lch({l}% {c} {h})"
