"""
CIE XYZ, referenced to D50. RGB (D65) is adapted with the Bradford
transform on the way in and out.
"""

from typing import Any, Mapping, Optional

from ..helpers import alpha_digits, clamp, is_present, round_digits, to_number
from ..types import RgbaColor, XyzaColor
from .rgb import clamp_rgba, linearize_rgb_channel, unlinearize_rgb_channel

# Theoretical light source that approximates "warm daylight"
D50 = XyzaColor(x=96.422, y=100, z=82.521)

# Bradford chromatic adaptation matrices
M_D65_TO_D50 = (
    (1.0478112, 0.0228866, -0.050127),
    (0.0295424, 0.9904844, -0.0170491),
    (-0.0092345, 0.0150436, 0.7521316),
)
M_D50_TO_D65 = (
    (0.9555766, -0.0230393, 0.0631636),
    (-0.0282895, 1.0099416, 0.0210077),
    (0.0122982, -0.020483, 1.3299098),
)

# Linear sRGB to XYZ, sRGB's own white (D65)
M_SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.072175),
    (0.0193339, 0.119192, 0.9503041),
)
# XYZ (0-100 scale) to linear sRGB
M_XYZ_TO_SRGB = (
    (0.032404542, -0.015371385, -0.004985314),
    (-0.00969266, 0.018760108, 0.00041556),
    (0.000556434, -0.002040259, 0.010572252),
)


def _apply(matrix, x: float, y: float, z: float):
    return tuple(row[0] * x + row[1] * y + row[2] * z for row in matrix)


def clamp_xyza(xyza: XyzaColor) -> XyzaColor:
    """Limit XYZ axis values assuming XYZ is relative to D50."""
    return XyzaColor(
        x=clamp(xyza.x, 0, D50.x),
        y=clamp(xyza.y, 0, D50.y),
        z=clamp(xyza.z, 0, D50.z),
        a=clamp(xyza.a),
    )


def round_xyza(xyza: XyzaColor, digits: int = 0) -> XyzaColor:
    return XyzaColor(
        x=round_digits(xyza.x, digits),
        y=round_digits(xyza.y, digits),
        z=round_digits(xyza.z, digits),
        a=round_digits(xyza.a, alpha_digits(digits)),
    )


def adapt_xyza_to_d50(xyza: XyzaColor) -> XyzaColor:
    """Bradford adaptation from D65 to D50."""
    x, y, z = _apply(M_D65_TO_D50, xyza.x, xyza.y, xyza.z)
    return XyzaColor(x=x, y=y, z=z, a=xyza.a)


def adapt_xyz_to_d65(xyza: XyzaColor):
    """Bradford adaptation from D50 to D65. Returns a bare (x, y, z) triple."""
    return _apply(M_D50_TO_D65, xyza.x, xyza.y, xyza.z)


def rgba_to_xyza(rgba: RgbaColor) -> XyzaColor:
    """Convert RGB (D65) to CIE XYZ (D50)."""
    linear = (linearize_rgb_channel(rgba.r), linearize_rgb_channel(rgba.g), linearize_rgb_channel(rgba.b))
    x, y, z = (v * 100 for v in _apply(M_SRGB_TO_XYZ, *linear))
    return clamp_xyza(adapt_xyza_to_d50(XyzaColor(x=x, y=y, z=z, a=rgba.a)))


def xyza_to_rgba(xyza: XyzaColor) -> RgbaColor:
    """Convert CIE XYZ (D50) to RGB (D65)."""
    r, g, b = _apply(M_XYZ_TO_SRGB, *adapt_xyz_to_d65(xyza))
    return clamp_rgba(RgbaColor(
        r=unlinearize_rgb_channel(r),
        g=unlinearize_rgb_channel(g),
        b=unlinearize_rgb_channel(b),
        a=xyza.a,
    ))


def parse_xyza(value: Mapping[str, Any]) -> Optional[RgbaColor]:
    """Parse an {x, y, z, a} object."""
    x, y, z = value.get("x"), value.get("y"), value.get("z")
    if not is_present(x) or not is_present(y) or not is_present(z):
        return None
    xyza = clamp_xyza(XyzaColor(x=to_number(x), y=to_number(y), z=to_number(z), a=to_number(value.get("a", 1))))
    return xyza_to_rgba(xyza)
