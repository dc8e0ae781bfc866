"""
CIELCH support.
https://lea.verou.me/2020/04/lch-colors-in-css-what-why-and-how/
"""

from ..extend import Plugin
from ..models.lch import parse_lcha, parse_lcha_string, rgba_to_lcha, rgba_to_lcha_string, round_lcha
from ..registry import ParserRegistry
from ..types import LchaColor


class LchMixin:
    def to_lch(self, digits: int = 2) -> LchaColor:
        return round_lcha(rgba_to_lcha(self.rgba), digits)

    def to_lch_string(self, digits: int = 2) -> str:
        return rgba_to_lcha_string(self.rgba, digits)


def install(registry: ParserRegistry) -> None:
    registry.register_string_parser(parse_lcha_string, "lch")
    registry.register_object_parser(parse_lcha, "lch")


plugin = Plugin("lch", install, LchMixin)
