"""
The color handle: an immutable wrapper around a canonical RGBA value.
"""

from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import BaseModel

from .helpers import ALPHA_PRECISION, clamp, round_digits
from .models.hex import rgba_to_hex
from .models.hsl import clamp_hsla, hsla_to_rgba, rgba_to_hsla, rgba_to_hsla_string, round_hsla
from .models.hsv import rgba_to_hsva, round_hsva
from .models.rgb import rgba_to_rgba_string, round_rgba
from .registry import ParserRegistry, create_registry
from .types import HslaColor, HsvaColor, RgbaColor

# Raw input a handle can be built from
RawInput = Union[str, Mapping[str, Any], BaseModel]


class BaseColor:
    """
    Immutable color handle. Every manipulation returns a new handle of the
    same class; input that no registered parser accepts yields opaque black
    with is_valid() returning False.
    """

    registry: ParserRegistry = create_registry()
    plugins: Tuple[str, ...] = ()

    def __init__(self, value: RawInput = None):
        parsed = self.registry.parse(value)
        self._format: Optional[str] = parsed.format if parsed else None
        self.rgba: RgbaColor = parsed.rgba if parsed else RgbaColor(r=0, g=0, b=0, a=1)

    @classmethod
    def coerce(cls, value: Union["BaseColor", RawInput]) -> "BaseColor":
        """Resolve a handle-or-raw-input argument to a handle."""
        if isinstance(value, BaseColor):
            return value if isinstance(value, cls) else cls(value.rgba)
        return cls(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_hex()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseColor):
            return NotImplemented
        return self.rgba == other.rgba

    def __hash__(self) -> int:
        return hash(self.rgba)

    @property
    def format(self) -> Optional[str]:
        """Name of the format the input was parsed from."""
        return self._format

    def is_valid(self) -> bool:
        return self._format is not None

    def brightness(self) -> float:
        """Perceived brightness [0-1], https://www.w3.org/TR/AERT/#color-contrast"""
        r, g, b = self.rgba.r, self.rgba.g, self.rgba.b
        return round_digits((r * 299 + g * 587 + b * 114) / 1000 / 255, 2)

    def is_dark(self) -> bool:
        return self.brightness() < 0.5

    def is_light(self) -> bool:
        return self.brightness() >= 0.5

    def to_hex(self) -> str:
        return rgba_to_hex(self.rgba)

    def to_rgb(self, digits: int = 0) -> RgbaColor:
        return round_rgba(self.rgba, digits)

    def to_rgb_string(self) -> str:
        return rgba_to_rgba_string(self.rgba)

    def to_hsl(self, digits: int = 0) -> HslaColor:
        return round_hsla(rgba_to_hsla(self.rgba), digits)

    def to_hsl_string(self) -> str:
        return rgba_to_hsla_string(self.rgba)

    def to_hsv(self, digits: int = 0) -> HsvaColor:
        return round_hsva(rgba_to_hsva(self.rgba), digits)

    def invert(self) -> "BaseColor":
        rgba = self.rgba
        return type(self)(RgbaColor(r=255 - rgba.r, g=255 - rgba.g, b=255 - rgba.b, a=rgba.a))

    def saturate(self, amount: float = 0.1) -> "BaseColor":
        hsla = rgba_to_hsla(self.rgba)
        return self._from_hsla(hsla.model_copy(update={"s": clamp(hsla.s + amount * 100, 0, 100)}))

    def desaturate(self, amount: float = 0.1) -> "BaseColor":
        return self.saturate(-amount)

    def grayscale(self) -> "BaseColor":
        return self.saturate(-1)

    def lighten(self, amount: float = 0.1) -> "BaseColor":
        hsla = rgba_to_hsla(self.rgba)
        return self._from_hsla(hsla.model_copy(update={"l": clamp(hsla.l + amount * 100, 0, 100)}))

    def darken(self, amount: float = 0.1) -> "BaseColor":
        return self.lighten(-amount)

    def rotate(self, amount: float = 15) -> "BaseColor":
        return self.set_hue(self.hue() + amount)

    def alpha(self) -> float:
        return round_digits(self.rgba.a, ALPHA_PRECISION)

    def set_alpha(self, value: float) -> "BaseColor":
        return type(self)(self.rgba.model_copy(update={"a": clamp(value)}))

    def hue(self) -> float:
        return round_digits(rgba_to_hsla(self.rgba).h)

    def set_hue(self, value: float) -> "BaseColor":
        hsla = rgba_to_hsla(self.rgba)
        return self._from_hsla(hsla.model_copy(update={"h": value}))

    def is_equal(self, other: Union["BaseColor", RawInput]) -> bool:
        return self.to_hex() == self.coerce(other).to_hex()

    def _from_hsla(self, hsla: HslaColor) -> "BaseColor":
        return type(self)(hsla_to_rgba(clamp_hsla(hsla)))
