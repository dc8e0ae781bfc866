"""
HWB (Hue-Whiteness-Blackness) support.
https://www.w3.org/TR/css-color-4/#the-hwb-notation
"""

from ..extend import Plugin
from ..models.hwb import parse_hwba, parse_hwba_string, rgba_to_hwba, rgba_to_hwba_string, round_hwba
from ..registry import ParserRegistry
from ..types import HwbaColor


class HwbMixin:
    def to_hwb(self, digits: int = 0) -> HwbaColor:
        return round_hwba(rgba_to_hwba(self.rgba), digits)

    def to_hwb_string(self, digits: int = 0) -> str:
        return rgba_to_hwba_string(self.rgba, digits)


def install(registry: ParserRegistry) -> None:
    registry.register_string_parser(parse_hwba_string, "hwb")
    registry.register_object_parser(parse_hwba, "hwb")


plugin = Plugin("hwb", install, HwbMixin)
