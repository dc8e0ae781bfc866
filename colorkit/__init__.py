"""
colorkit - color conversion and CSS Color 4 parsing.

    >>> from colorkit import color
    >>> color("hwb(0 0% 0%)").to_hex()
    '#ff0000'
    >>> color("device-cmyk(0% 100% 0% 0%)").to_hex()
    '#ff00ff'

Color is composed with every bundled plugin. Build a handle class with a
chosen subset, in a chosen precedence order, with extend().
"""

from .color import BaseColor, RawInput
from .errors import ColorKitError, RegistryFrozenError
from .extend import Plugin, extend
from .plugins import ALL_PLUGINS
from .registry import ParseResult, ParserRegistry, create_registry
from .types import (
    CmykaColor,
    HslaColor,
    HsvaColor,
    HwbaColor,
    LabaColor,
    LchaColor,
    RgbaColor,
    XyzaColor,
)

Color = extend(*ALL_PLUGINS)


def color(value) -> BaseColor:
    """Build a Color from a string, a channel mapping or an existing handle."""
    return Color.coerce(value)


__version__ = "1.0.0"

__all__ = [
    "ALL_PLUGINS",
    "BaseColor",
    "CmykaColor",
    "Color",
    "ColorKitError",
    "HslaColor",
    "HsvaColor",
    "HwbaColor",
    "LabaColor",
    "LchaColor",
    "ParseResult",
    "ParserRegistry",
    "Plugin",
    "RawInput",
    "RegistryFrozenError",
    "RgbaColor",
    "XyzaColor",
    "color",
    "create_registry",
    "extend",
]
