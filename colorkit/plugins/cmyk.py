"""
CMYK support.
https://lea.verou.me/2009/03/cmyk-colors-in-css-useful-or-useless/
"""

from ..extend import Plugin
from ..models.cmyk import parse_cmyka, parse_cmyka_string, rgba_to_cmyka, rgba_to_cmyka_string, round_cmyka
from ..registry import ParserRegistry
from ..types import CmykaColor


class CmykMixin:
    def to_cmyk(self, digits: int = 0) -> CmykaColor:
        return round_cmyka(rgba_to_cmyka(self.rgba), digits)

    def to_cmyk_string(self, digits: int = 2) -> str:
        return rgba_to_cmyka_string(self.rgba, digits)


def install(registry: ParserRegistry) -> None:
    registry.register_object_parser(parse_cmyka, "cmyk")
    registry.register_string_parser(parse_cmyka_string, "cmyk")


plugin = Plugin("cmyk", install, CmykMixin)
