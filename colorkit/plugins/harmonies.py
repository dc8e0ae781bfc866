"""
Color harmonies: fixed hue shifts of the source color.
https://en.wikipedia.org/wiki/Harmony_(color)
"""

from typing import List

from ..extend import Plugin
from ..metrics import HARMONY_HUE_SHIFTS
from ..registry import ParserRegistry
from ..types import HarmonyType


class HarmoniesMixin:
    def harmonies(self, kind: HarmonyType = "complementary") -> List:
        try:
            shifts = HARMONY_HUE_SHIFTS[kind]
        except KeyError:
            raise ValueError(f"unknown harmony {kind!r}") from None
        return [self.rotate(shift) for shift in shifts]


def install(registry: ParserRegistry) -> None:
    """Contributes methods only."""


plugin = Plugin("harmonies", install, HarmoniesMixin)
