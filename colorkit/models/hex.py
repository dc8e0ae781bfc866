"""
Hexadecimal notation: #rgb, #rgba, #rrggbb, #rrggbbaa.
"""

import re
from typing import Optional

from ..helpers import round_digits
from ..types import RgbaColor
from .rgb import round_rgba

HEX_RE = re.compile(r"^#([0-9a-f]{3,8})$", re.IGNORECASE)


def parse_hex(s: str) -> Optional[RgbaColor]:
    """Parse hex color string to RGBA."""
    m = HEX_RE.fullmatch(s)
    if not m:
        return None
    h = m.group(1)
    if len(h) <= 4:
        return RgbaColor(
            r=int(h[0] * 2, 16),
            g=int(h[1] * 2, 16),
            b=int(h[2] * 2, 16),
            a=round_digits(int(h[3] * 2, 16) / 255, 2) if len(h) == 4 else 1,
        )
    if len(h) in (6, 8):
        return RgbaColor(
            r=int(h[0:2], 16),
            g=int(h[2:4], 16),
            b=int(h[4:6], 16),
            a=round_digits(int(h[6:8], 16) / 255, 2) if len(h) == 8 else 1,
        )
    return None


def rgba_to_hex(rgba: RgbaColor) -> str:
    """Convert RGBA to hex string, with an alpha byte only when translucent."""
    rounded = round_rgba(rgba)
    alpha = format(int(round_digits(rounded.a * 255)), "02x") if rounded.a < 1 else ""
    return "#" + "".join(format(int(v), "02x") for v in (rounded.r, rounded.g, rounded.b)) + alpha
