"""
Device RGB: the canonical model every other model converts through.
"""

import re
from typing import Any, Mapping, Optional

from ..helpers import alpha_digits, clamp, format_number, is_present, round_digits, to_number
from ..types import RgbaColor


def clamp_rgba(rgba: RgbaColor) -> RgbaColor:
    """Clamp RGBA channels into their valid ranges."""
    return RgbaColor(
        r=clamp(rgba.r, 0, 255),
        g=clamp(rgba.g, 0, 255),
        b=clamp(rgba.b, 0, 255),
        a=clamp(rgba.a),
    )


def round_rgba(rgba: RgbaColor, digits: int = 0) -> RgbaColor:
    """Round RGBA channels for presentation."""
    return RgbaColor(
        r=round_digits(rgba.r, digits),
        g=round_digits(rgba.g, digits),
        b=round_digits(rgba.b, digits),
        a=round_digits(rgba.a, alpha_digits(digits)),
    )


def parse_rgba(value: Mapping[str, Any]) -> Optional[RgbaColor]:
    """Parse an {r, g, b, a} object."""
    r, g, b = value.get("r"), value.get("g"), value.get("b")
    if not is_present(r) or not is_present(g) or not is_present(b):
        return None
    return RgbaColor(r=to_number(r), g=to_number(g), b=to_number(b), a=to_number(value.get("a", 1)))


def linearize_rgb_channel(value: float) -> float:
    """Convert an RGB channel [0-255] to linear light [0-1]."""
    ratio = value / 255
    return ratio / 12.92 if ratio < 0.04045 else ((ratio + 0.055) / 1.055) ** 2.4


def unlinearize_rgb_channel(ratio: float) -> float:
    """Convert a linear light channel [0-1] back to gamma encoded [0-255]."""
    value = 1.055 * (ratio ** (1 / 2.4)) - 0.055 if ratio > 0.0031308 else 12.92 * ratio
    return value * 255


# RGB strings -----------------------------------------------------

num = r"([+-]?\d*\.?\d+)"

COMMA_RGBA_RE = re.compile(
    f"^rgba?\\(\\s*{num}(%)?\\s*,\\s*{num}(%)?\\s*,\\s*{num}(%)?\\s*(?:,\\s*{num}(%)?\\s*)?\\)$",
    re.IGNORECASE,
)

SPACE_RGBA_RE = re.compile(
    f"^rgba?\\(\\s*{num}(%)?\\s+{num}(%)?\\s+{num}(%)?\\s*(?:/\\s*{num}(%)?\\s*)?\\)$",
    re.IGNORECASE,
)


def parse_rgba_string(s: str) -> Optional[RgbaColor]:
    """Parse rgb()/rgba() in either the comma or the space separated syntax."""
    m = COMMA_RGBA_RE.fullmatch(s) or SPACE_RGBA_RE.fullmatch(s)
    if not m:
        return None
    r, r_pct, g, g_pct, b, b_pct, a, a_pct = m.groups()
    # mixing numbers and percentages is not allowed
    if r_pct != g_pct or g_pct != b_pct:
        return None
    scale = 255 / 100 if r_pct else 1
    return RgbaColor(
        r=float(r) * scale,
        g=float(g) * scale,
        b=float(b) * scale,
        a=1 if a is None else float(a) / (100 if a_pct else 1),
    )


def rgba_to_rgba_string(rgba: RgbaColor) -> str:
    """Convert RGBA to an rgb()/rgba() string."""
    rounded = round_rgba(rgba)
    r, g, b = (format_number(v) for v in (rounded.r, rounded.g, rounded.b))
    if rounded.a < 1:
        return f"rgba({r}, {g}, {b}, {format_number(rounded.a)})"
    return f"rgb({r}, {g}, {b})"
