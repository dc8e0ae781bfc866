"""
Accessibility and contrast utilities following WCAG 2.0.
https://www.w3.org/TR/WCAG20/
"""

from ..extend import Plugin
from ..helpers import floor_digits, round_digits
from ..metrics import get_contrast, get_luminance, get_minimal_contrast
from ..registry import ParserRegistry
from ..types import ContrastLevel, ContrastSize


class A11yMixin:
    def luminance(self) -> float:
        """Relative luminance [0-1]."""
        return round_digits(get_luminance(self.rgba), 2)

    def contrast(self, color="#FFF") -> float:
        """Contrast ratio [1-21] against another color."""
        other = self.coerce(color)
        return floor_digits(get_contrast(self.rgba, other.to_rgb()), 2)

    def is_readable(self, color="#FFF", level: ContrastLevel = "AA", size: ContrastSize = "normal") -> bool:
        """Whether text in one color is readable on the other."""
        return self.contrast(color) >= get_minimal_contrast(level, size)


def install(registry: ParserRegistry) -> None:
    """Contributes methods only."""


plugin = Plugin("a11y", install, A11yMixin)
