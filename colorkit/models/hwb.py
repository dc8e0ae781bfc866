"""
HWB (Hue-Whiteness-Blackness).
https://www.w3.org/TR/css-color-4/#the-hwb-notation
"""

import re
from typing import Any, Mapping, Optional

from ..helpers import alpha_digits, clamp, clamp_hue, format_number, is_present, parse_hue, round_digits, to_number
from ..types import HsvaColor, HwbaColor, RgbaColor
from .hsv import hsva_to_rgba, rgba_to_hsva


def clamp_hwba(hwba: HwbaColor) -> HwbaColor:
    return HwbaColor(
        h=clamp_hue(hwba.h),
        w=clamp(hwba.w, 0, 100),
        b=clamp(hwba.b, 0, 100),
        a=clamp(hwba.a),
    )


def round_hwba(hwba: HwbaColor, digits: int = 0) -> HwbaColor:
    return HwbaColor(
        h=round_digits(hwba.h, digits),
        w=round_digits(hwba.w, digits),
        b=round_digits(hwba.b, digits),
        a=round_digits(hwba.a, alpha_digits(digits)),
    )


def rgba_to_hwba(rgba: RgbaColor) -> HwbaColor:
    """Convert RGBA to HWBA; hue is shared with HSV."""
    hsva = rgba_to_hsva(rgba)
    return HwbaColor(
        h=hsva.h,
        w=min(rgba.r, rgba.g, rgba.b) / 255 * 100,
        b=100 - max(rgba.r, rgba.g, rgba.b) / 255 * 100,
        a=rgba.a,
    )


def hwba_to_rgba(hwba: HwbaColor) -> RgbaColor:
    """Convert HWBA to RGBA. Full blackness is black whatever the whiteness."""
    return hsva_to_rgba(HsvaColor(
        h=hwba.h,
        s=0 if hwba.b == 100 else 100 - hwba.w / (100 - hwba.b) * 100,
        v=100 - hwba.b,
        a=hwba.a,
    ))


def parse_hwba(value: Mapping[str, Any]) -> Optional[RgbaColor]:
    """Parse an {h, w, b, a} object."""
    h, w, b = value.get("h"), value.get("w"), value.get("b")
    if not is_present(h) or not is_present(w) or not is_present(b):
        return None
    hwba = clamp_hwba(HwbaColor(h=to_number(h), w=to_number(w), b=to_number(b), a=to_number(value.get("a", 1))))
    return hwba_to_rgba(hwba)


# HWB strings -----------------------------------------------------

# hwb( <hue> <percentage> <percentage> [ / <alpha-value> ]? )
HWBA_RE = re.compile(
    r"^hwb\(\s*([+-]?\d*\.?\d+)(deg|rad|grad|turn)?\s+([+-]?\d*\.?\d+)%\s+([+-]?\d*\.?\d+)%\s*(?:/\s*([+-]?\d*\.?\d+)(%)?\s*)?\)$",
    re.IGNORECASE,
)


def parse_hwba_string(s: str) -> Optional[RgbaColor]:
    """Parse an hwb() string to RGBA."""
    m = HWBA_RE.fullmatch(s)
    if not m:
        return None
    h, unit, w, b, a, a_pct = m.groups()
    hwba = clamp_hwba(HwbaColor(
        h=parse_hue(h, unit),
        w=float(w),
        b=float(b),
        a=1 if a is None else float(a) / (100 if a_pct else 1),
    ))
    return hwba_to_rgba(hwba)


def rgba_to_hwba_string(rgba: RgbaColor, digits: int = 0) -> str:
    """Convert RGBA to an hwb() string."""
    hwba = round_hwba(rgba_to_hwba(rgba), digits)
    h, w, b = format_number(hwba.h), format_number(hwba.w), format_number(hwba.b)
    if hwba.a < 1:
        return f"hwb({h} {w}% {b}% / {format_number(hwba.a)})"
    return f"hwb({h} {w}% {b}%)"
