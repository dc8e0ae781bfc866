"""
Color value types.

RgbaColor is the canonical value a color handle stores. Every other model
is a derived view computed on demand from it.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from .helpers import clamp


class ColorModel(BaseModel):
    """Immutable channel tuple, compared by value."""

    model_config = ConfigDict(frozen=True)


class RgbaColor(ColorModel):
    r: float
    g: float
    b: float
    a: float = 1

    @field_validator("r", "g", "b")
    @classmethod
    def _clamp_channel(cls, v: float) -> float:
        return clamp(v, 0, 255)

    @field_validator("a")
    @classmethod
    def _clamp_alpha(cls, v: float) -> float:
        return clamp(v)


class HslaColor(ColorModel):
    h: float
    s: float
    l: float
    a: float = 1


class HsvaColor(ColorModel):
    h: float
    s: float
    v: float
    a: float = 1


class HwbaColor(ColorModel):
    h: float
    w: float
    b: float
    a: float = 1


class XyzaColor(ColorModel):
    x: float
    y: float
    z: float
    a: float = 1


class LabaColor(ColorModel):
    l: float
    a: float
    b: float
    alpha: float = 1


class LchaColor(ColorModel):
    l: float
    c: float
    h: float
    a: float = 1


class CmykaColor(ColorModel):
    c: float
    m: float
    y: float
    k: float
    a: float = 1


ContrastLevel = Literal["AA", "AAA"]
ContrastSize = Literal["normal", "large"]
HarmonyType = Literal[
    "analogous",
    "complementary",
    "double-split-complementary",
    "rectangle",
    "tetradic",
    "triadic",
    "split-complementary",
]
