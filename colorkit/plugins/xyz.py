"""
CIE XYZ support.
https://en.wikipedia.org/wiki/CIE_1931_color_space
"""

from ..extend import Plugin
from ..models.xyz import parse_xyza, rgba_to_xyza, round_xyza
from ..registry import ParserRegistry
from ..types import XyzaColor


class XyzMixin:
    def to_xyz(self, digits: int = 2) -> XyzaColor:
        return round_xyza(rgba_to_xyza(self.rgba), digits)


def install(registry: ParserRegistry) -> None:
    registry.register_object_parser(parse_xyza, "xyz")


plugin = Plugin("xyz", install, XyzMixin)
