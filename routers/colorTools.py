"""
Color tools exposed over HTTP (and MCP, see main.py).
Every color argument accepts any CSS string colorkit can parse: hex, rgb(),
hsl(), hwb(), lab(), lch(), device-cmyk() and the basic named colors.
"""

import logging
from typing import Callable, Dict, Optional

from fastapi import APIRouter, HTTPException

from colorkit import Color
from schemas.requests import (
    ColorConvertRequest,
    ContrastRequest,
    DeltaRequest,
    HarmoniesRequest,
    MixRequest,
    PaletteRequest,
)
from schemas.responses import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def parse_css_color(code: str) -> Color:
    """Parse any supported CSS color string, 400 when nothing accepts it."""
    color = Color(code)
    if not color.is_valid():
        logger.info("Rejected color input %r", code)
        raise HTTPException(status_code=400, detail=f"Invalid CSS color: {code!r}")
    return color


def _with_digits(method: Callable, digits: Optional[int]):
    return method() if digits is None else method(digits)


# Targeted conversion API ----------------------------------------

CONVERTERS: Dict[str, Callable[[Color, Optional[int]], object]] = {
    "hex": lambda c, d: c.to_hex(),
    "rgb": lambda c, d: c.to_rgb_string(),
    "hsl": lambda c, d: c.to_hsl_string(),
    "hsv": lambda c, d: _with_digits(c.to_hsv, d).model_dump(),
    "hwb": lambda c, d: _with_digits(c.to_hwb_string, d),
    "lab": lambda c, d: _with_digits(c.to_lab_string, d),
    "lch": lambda c, d: _with_digits(c.to_lch_string, d),
    "xyz": lambda c, d: _with_digits(c.to_xyz, d).model_dump(),
    "cmyk": lambda c, d: _with_digits(c.to_cmyk_string, d),
    "named": lambda c, d: c.to_name(),
}


@router.post("/convert_color_code", response_model=SuccessResponse, operation_id="convert_color_code", description="Convert a CSS color code to a target format")
async def parse_and_convert(request: ColorConvertRequest):
    """Parse CSS color and convert to target format."""
    color = parse_css_color(request.code)
    message = CONVERTERS[request.target](color, request.digits)
    return SuccessResponse(success=True, message=message, detail={"source_format": color.format})


# Accessibility ---------------------------------------------------

@router.post("/contrast", response_model=SuccessResponse, operation_id="contrast_ratio", description="WCAG contrast ratio of a text and background color pair")
async def contrast(request: ContrastRequest):
    """Contrast ratio and readability of a color pair."""
    foreground = parse_css_color(request.foreground)
    background = parse_css_color(request.background)
    ratio = foreground.contrast(background)
    readable = foreground.is_readable(background, level=request.level, size=request.size)
    return SuccessResponse(success=True, message=ratio, detail={"readable": readable, "level": request.level, "size": request.size})


# Perceptual difference and mixing --------------------------------

@router.post("/delta", response_model=SuccessResponse, operation_id="color_delta", description="Perceived difference (CIEDE2000, 0 to 1) between two colors")
async def delta(request: DeltaRequest):
    """Normalized CIEDE2000 difference."""
    first = parse_css_color(request.first)
    second = parse_css_color(request.second)
    return SuccessResponse(success=True, message=first.delta(second))


@router.post("/mix", response_model=SuccessResponse, operation_id="mix_colors", description="Mix two colors in CIELAB")
async def mix(request: MixRequest):
    """Mix two colors, returning the hex code of the mixture."""
    first = parse_css_color(request.first)
    second = parse_css_color(request.second)
    return SuccessResponse(success=True, message=first.mix(second, request.ratio).to_hex())


@router.post("/palette", response_model=SuccessResponse, operation_id="color_palette", description="Tints, shades or tones of a color")
async def palette(request: PaletteRequest):
    """Palette mixing a color towards white, black or gray."""
    color = parse_css_color(request.code)
    colors = getattr(color, request.kind)(request.count)
    return SuccessResponse(success=True, message=[c.to_hex() for c in colors])


@router.post("/harmonies", response_model=SuccessResponse, operation_id="color_harmonies", description="Harmony colors of a color")
async def harmonies(request: HarmoniesRequest):
    """Hue-shifted harmony colors."""
    color = parse_css_color(request.code)
    return SuccessResponse(success=True, message=[c.to_hex() for c in color.harmonies(request.kind)])
