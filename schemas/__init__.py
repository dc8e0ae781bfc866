from .requests import (
    ColorConvertRequest,
    ContrastRequest,
    DeltaRequest,
    HarmoniesRequest,
    MixRequest,
    PaletteRequest,
)
from .responses import SuccessResponse, ErrorResponse

__all__ = [
    "ColorConvertRequest",
    "ContrastRequest",
    "DeltaRequest",
    "HarmoniesRequest",
    "MixRequest",
    "PaletteRequest",
    "SuccessResponse",
    "ErrorResponse",
]
