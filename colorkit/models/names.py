"""
CSS named colors.
"""

from typing import Dict, Optional

from ..types import RgbaColor
from .hex import parse_hex, rgba_to_hex

# CSS Level 1 keywords plus the common additions
NAMED: Dict[str, str] = {
    "black": "#000000",
    "silver": "#c0c0c0",
    "gray": "#808080",
    "grey": "#808080",
    "white": "#ffffff",
    "maroon": "#800000",
    "red": "#ff0000",
    "purple": "#800080",
    "fuchsia": "#ff00ff",
    "magenta": "#ff00ff",
    "green": "#008000",
    "lime": "#00ff00",
    "olive": "#808000",
    "yellow": "#ffff00",
    "navy": "#000080",
    "blue": "#0000ff",
    "teal": "#008080",
    "aqua": "#00ffff",
    "cyan": "#00ffff",
    "orange": "#ffa500",
    "rebeccapurple": "#663399",
    "transparent": "#00000000",
}

_BY_HEX: Dict[str, str] = {}
for _name, _hex in NAMED.items():
    _BY_HEX.setdefault(_hex, _name)


def parse_name(s: str) -> Optional[RgbaColor]:
    """Parse a named color string to RGBA."""
    hex_val = NAMED.get(s.lower())
    if not hex_val:
        return None
    return parse_hex(hex_val)


def rgba_to_name(rgba: RgbaColor) -> Optional[str]:
    """Name of the color if one matches it exactly."""
    return _BY_HEX.get(rgba_to_hex(rgba))
