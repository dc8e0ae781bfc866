"""
Mixing and palettes, interpolated in CIELAB.
"""

from typing import List

from ..extend import Plugin
from ..metrics import mix_laba
from ..registry import ParserRegistry


class MixMixin:
    def mix(self, color, ratio: float = 0.5):
        """Mix with another color; ratio 0 keeps this one, 1 gives the other."""
        other = self.coerce(color)
        return type(self)(mix_laba(self.to_rgb(), other.to_rgb(), ratio))

    def tints(self, count: int = 5) -> List:
        return self._mix_palette("#fff", count)

    def shades(self, count: int = 5) -> List:
        return self._mix_palette("#000", count)

    def tones(self, count: int = 5) -> List:
        return self._mix_palette("#808080", count)

    def _mix_palette(self, target: str, count: int) -> List:
        if count < 2:
            raise ValueError(f"a palette needs at least 2 colors, got {count}")
        step = 1 / (count - 1)
        return [self.mix(target, step * i) for i in range(count)]


def install(registry: ParserRegistry) -> None:
    """Contributes methods only."""


plugin = Plugin("mix", install, MixMixin)
