from pydantic import BaseModel, Field
from typing import Literal, Optional

from colorkit.types import ContrastLevel, ContrastSize, HarmonyType

TargetFormat = Literal["hex", "rgb", "hsl", "hsv", "hwb", "lab", "lch", "xyz", "cmyk", "named"]


class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The CSS color code to convert")
    target: TargetFormat = Field(..., description="The target color code format to convert to")
    digits: Optional[int] = Field(None, ge=0, le=10, description="Decimal digits to round channels to")


class ContrastRequest(BaseModel):
    foreground: str = Field(..., description="Text color")
    background: str = Field("#fff", description="Background color")
    level: ContrastLevel = Field("AA", description="WCAG conformance level")
    size: ContrastSize = Field("normal", description="Text size")


class DeltaRequest(BaseModel):
    first: str = Field(..., description="First color")
    second: str = Field("#fff", description="Second color")


class MixRequest(BaseModel):
    first: str = Field(..., description="Base color")
    second: str = Field(..., description="Color mixed in")
    ratio: float = Field(0.5, ge=0, le=1, description="Share of the second color")


class PaletteRequest(BaseModel):
    code: str = Field(..., description="Source color")
    kind: Literal["tints", "shades", "tones"] = Field("tints", description="Color mixed towards: white, black or gray")
    count: int = Field(5, ge=2, le=100, description="Number of colors, source included")


class HarmoniesRequest(BaseModel):
    code: str = Field(..., description="Source color")
    kind: HarmonyType = Field("complementary", description="Harmony type")
