"""
HSL, converted through HSV.
"""

import re
from typing import Any, Mapping, Optional

from ..helpers import alpha_digits, clamp, clamp_hue, format_number, is_present, parse_hue, round_digits, to_number
from ..types import HslaColor, HsvaColor, RgbaColor
from .hsv import hsva_to_rgba, rgba_to_hsva


def clamp_hsla(hsla: HslaColor) -> HslaColor:
    return HslaColor(
        h=clamp_hue(hsla.h),
        s=clamp(hsla.s, 0, 100),
        l=clamp(hsla.l, 0, 100),
        a=clamp(hsla.a),
    )


def round_hsla(hsla: HslaColor, digits: int = 0) -> HslaColor:
    return HslaColor(
        h=round_digits(hsla.h, digits),
        s=round_digits(hsla.s, digits),
        l=round_digits(hsla.l, digits),
        a=round_digits(hsla.a, alpha_digits(digits)),
    )


def hsla_to_hsva(hsla: HslaColor) -> HsvaColor:
    s = hsla.s * (hsla.l if hsla.l < 50 else 100 - hsla.l) / 100
    return HsvaColor(
        h=hsla.h,
        s=(2 * s) / (hsla.l + s) * 100 if s > 0 else 0,
        v=hsla.l + s,
        a=hsla.a,
    )


def hsva_to_hsla(hsva: HsvaColor) -> HslaColor:
    hh = (200 - hsva.s) * hsva.v / 100
    return HslaColor(
        h=hsva.h,
        s=(hsva.s * hsva.v / 100) / (hh if hh <= 100 else 200 - hh) * 100 if 0 < hh < 200 else 0,
        l=hh / 2,
        a=hsva.a,
    )


def hsla_to_rgba(hsla: HslaColor) -> RgbaColor:
    return hsva_to_rgba(hsla_to_hsva(hsla))


def rgba_to_hsla(rgba: RgbaColor) -> HslaColor:
    return hsva_to_hsla(rgba_to_hsva(rgba))


def parse_hsla(value: Mapping[str, Any]) -> Optional[RgbaColor]:
    """Parse an {h, s, l, a} object."""
    h, s, l = value.get("h"), value.get("s"), value.get("l")
    if not is_present(h) or not is_present(s) or not is_present(l):
        return None
    hsla = clamp_hsla(HslaColor(h=to_number(h), s=to_number(s), l=to_number(l), a=to_number(value.get("a", 1))))
    return hsla_to_rgba(hsla)


# HSL strings -----------------------------------------------------

num = r"([+-]?\d*\.?\d+)"
angle = f"{num}(deg|rad|grad|turn)?"

COMMA_HSLA_RE = re.compile(
    f"^hsla?\\(\\s*{angle}\\s*,\\s*{num}%\\s*,\\s*{num}%\\s*(?:,\\s*{num}(%)?\\s*)?\\)$",
    re.IGNORECASE,
)

SPACE_HSLA_RE = re.compile(
    f"^hsla?\\(\\s*{angle}\\s+{num}%\\s+{num}%\\s*(?:/\\s*{num}(%)?\\s*)?\\)$",
    re.IGNORECASE,
)


def parse_hsla_string(s: str) -> Optional[RgbaColor]:
    """Parse hsl()/hsla() in either the comma or the space separated syntax."""
    m = COMMA_HSLA_RE.fullmatch(s) or SPACE_HSLA_RE.fullmatch(s)
    if not m:
        return None
    h, unit, sat, light, a, a_pct = m.groups()
    hsla = clamp_hsla(HslaColor(
        h=parse_hue(h, unit),
        s=float(sat),
        l=float(light),
        a=1 if a is None else float(a) / (100 if a_pct else 1),
    ))
    return hsla_to_rgba(hsla)


def rgba_to_hsla_string(rgba: RgbaColor) -> str:
    """Convert RGBA to an hsl()/hsla() string."""
    hsla = round_hsla(rgba_to_hsla(rgba))
    h, s, l = format_number(hsla.h), format_number(hsla.s), format_number(hsla.l)
    if hsla.a < 1:
        return f"hsla({h}, {s}%, {l}%, {format_number(hsla.a)})"
    return f"hsl({h}, {s}%, {l}%)"
