"""
CIELAB support and CIEDE2000 color difference.
https://en.wikipedia.org/wiki/CIELAB_color_space
"""

from ..extend import Plugin
from ..helpers import clamp, round_digits
from ..metrics import get_delta_e00
from ..models.lab import parse_laba, parse_laba_string, rgba_to_laba, rgba_to_laba_string, round_laba
from ..registry import ParserRegistry
from ..types import LabaColor


class LabMixin:
    def to_lab(self, digits: int = 2) -> LabaColor:
        return round_laba(rgba_to_laba(self.rgba), digits)

    def to_lab_string(self, digits: int = 2) -> str:
        return rgba_to_laba_string(self.rgba, digits)

    def delta(self, color="#FFF") -> float:
        """Perceived difference to another color, 0 (same) to 1 (opposite)."""
        compared = self.coerce(color)
        delta = get_delta_e00(self.to_lab(), compared.to_lab()) / 100
        return clamp(round_digits(delta, 3))


def install(registry: ParserRegistry) -> None:
    registry.register_string_parser(parse_laba_string, "lab")
    registry.register_object_parser(parse_laba, "lab")


plugin = Plugin("lab", install, LabMixin)
