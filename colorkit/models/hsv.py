"""
HSV: the cylindrical RGB model HSL and HWB are built on.
"""

import math
from typing import Any, Mapping, Optional

from ..helpers import alpha_digits, clamp, clamp_hue, is_present, round_digits, to_number
from ..types import HsvaColor, RgbaColor


def clamp_hsva(hsva: HsvaColor) -> HsvaColor:
    return HsvaColor(
        h=clamp_hue(hsva.h),
        s=clamp(hsva.s, 0, 100),
        v=clamp(hsva.v, 0, 100),
        a=clamp(hsva.a),
    )


def round_hsva(hsva: HsvaColor, digits: int = 0) -> HsvaColor:
    return HsvaColor(
        h=round_digits(hsva.h, digits),
        s=round_digits(hsva.s, digits),
        v=round_digits(hsva.v, digits),
        a=round_digits(hsva.a, alpha_digits(digits)),
    )


def rgba_to_hsva(rgba: RgbaColor) -> HsvaColor:
    """Convert RGBA to HSVA. Hue and saturation are 0 for grays."""
    r, g, b = rgba.r, rgba.g, rgba.b
    max_val = max(r, g, b)
    delta = max_val - min(r, g, b)

    if not delta:
        hh = 0.0
    elif max_val == r:
        hh = (g - b) / delta
    elif max_val == g:
        hh = 2 + (b - r) / delta
    else:
        hh = 4 + (r - g) / delta

    return HsvaColor(
        h=60 * (hh + 6 if hh < 0 else hh),
        s=delta / max_val * 100 if max_val else 0,
        v=max_val / 255 * 100,
        a=rgba.a,
    )


def hsva_to_rgba(hsva: HsvaColor) -> RgbaColor:
    """Convert HSVA to RGBA using the six hue sectors."""
    h = hsva.h / 360 * 6
    s = hsva.s / 100
    v = hsva.v / 100

    hh = math.floor(h)
    b = v * (1 - s)
    c = v * (1 - (h - hh) * s)
    d = v * (1 - (1 - h + hh) * s)
    sector = hh % 6

    return RgbaColor(
        r=(v, c, b, b, d, v)[sector] * 255,
        g=(d, v, v, c, b, b)[sector] * 255,
        b=(b, b, d, v, v, c)[sector] * 255,
        a=hsva.a,
    )


def parse_hsva(value: Mapping[str, Any]) -> Optional[RgbaColor]:
    """Parse an {h, s, v, a} object."""
    h, s, v = value.get("h"), value.get("s"), value.get("v")
    if not is_present(h) or not is_present(s) or not is_present(v):
        return None
    hsva = clamp_hsva(HsvaColor(h=to_number(h), s=to_number(s), v=to_number(v), a=to_number(value.get("a", 1))))
    return hsva_to_rgba(hsva)
