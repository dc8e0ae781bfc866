"""
Metrics derived from the color models: WCAG luminance and contrast,
CIEDE2000 color difference, LAB mixing and harmony hue shifts.
"""

import math
from typing import Dict, Tuple

from .models.lab import clamp_laba, laba_to_rgba, rgba_to_laba
from .models.rgb import linearize_rgb_channel
from .types import ContrastLevel, ContrastSize, LabaColor, RgbaColor

# Hue shifts producing each color harmony
HARMONY_HUE_SHIFTS: Dict[str, Tuple[int, ...]] = {
    "analogous": (-30, 0, 30),
    "complementary": (0, 180),
    "double-split-complementary": (-30, 0, 30, 150, 210),
    "rectangle": (0, 60, 180, 240),
    "tetradic": (0, 90, 180, 270),
    "triadic": (0, 120, 240),
    "split-complementary": (0, 150, 210),
}


def get_luminance(rgba: RgbaColor) -> float:
    """
    Relative luminance of a color [0-1].
    https://www.w3.org/TR/WCAG20/#relativeluminancedef
    """
    r = linearize_rgb_channel(rgba.r)
    g = linearize_rgb_channel(rgba.g)
    b = linearize_rgb_channel(rgba.b)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def get_contrast(rgba1: RgbaColor, rgba2: RgbaColor) -> float:
    """
    Contrast ratio of a color pair [1-21].
    http://www.w3.org/TR/WCAG20/#contrast-ratiodef
    """
    l1 = get_luminance(rgba1)
    l2 = get_luminance(rgba2)
    lighter, darker = (l1, l2) if l1 > l2 else (l2, l1)
    return (lighter + 0.05) / (darker + 0.05)


def get_minimal_contrast(level: ContrastLevel = "AA", size: ContrastSize = "normal") -> float:
    """WCAG text contrast requirement for a conformance level and text size."""
    if level == "AAA" and size == "normal":
        return 7
    if level == "AA" and size == "large":
        return 3
    return 4.5


def get_delta_e00(laba1: LabaColor, laba2: LabaColor) -> float:
    """
    Perceived difference of two colors per CIEDE2000, typically 0 to 100.

    | Delta E | Perception                             |
    |---------|----------------------------------------|
    | <= 1.0  | Not perceptible by human eyes          |
    | 1 - 2   | Perceptible through close observation  |
    | 2 - 10  | Perceptible at a glance                |
    | 11 - 49 | Colors are more similar than opposite  |
    | 100     | Colors are exact opposite              |

    http://www.brucelindbloom.com/index.html?Eqn_DeltaE_CIE2000.html
    """
    l1, a1, b1 = laba1.l, laba1.a, laba1.b
    l2, a2, b2 = laba2.l, laba2.a, laba2.b

    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    mean_c = (c1 + c2) / 2
    mean_l = (l1 + l2) / 2

    c7 = mean_c ** 7
    g = 0.5 * (1 - math.sqrt(c7 / (c7 + 25 ** 7)))

    a11 = a1 * (1 + g)
    a22 = a2 * (1 + g)
    c11 = math.hypot(a11, b1)
    c22 = math.hypot(a22, b2)
    mean_c1 = (c11 + c22) / 2

    h1 = 0.0 if a11 == 0 and b1 == 0 else math.degrees(math.atan2(b1, a11))
    h2 = 0.0 if a22 == 0 and b2 == 0 else math.degrees(math.atan2(b2, a22))
    if h1 < 0:
        h1 += 360
    if h2 < 0:
        h2 += 360

    dh = h2 - h1
    dh_abs = abs(h2 - h1)
    if dh_abs > 180 and h2 <= h1:
        dh += 360
    elif dh_abs > 180 and h2 > h1:
        dh -= 360

    mean_h = h1 + h2
    if dh_abs <= 180:
        mean_h /= 2
    else:
        mean_h = (mean_h + 360 if h1 + h2 < 360 else mean_h - 360) / 2

    t = (
        1
        - 0.17 * math.cos(math.radians(mean_h - 30))
        + 0.24 * math.cos(math.radians(2 * mean_h))
        + 0.32 * math.cos(math.radians(3 * mean_h + 6))
        - 0.2 * math.cos(math.radians(4 * mean_h - 63))
    )

    d_l = l2 - l1
    d_c = c22 - c11
    d_h = 2 * math.sin(math.radians(dh) / 2) * math.sqrt(c11 * c22)

    s_l = 1 + (0.015 * (mean_l - 50) ** 2) / math.sqrt(20 + (mean_l - 50) ** 2)
    s_c = 1 + 0.045 * mean_c1
    s_h = 1 + 0.015 * mean_c1 * t

    d_theta = 30 * math.exp(-(((mean_h - 275) / 25) ** 2))
    r_c = 2 * math.sqrt(c7 / (c7 + 25 ** 7))
    r_t = -r_c * math.sin(math.radians(2 * d_theta))

    # kL, kC and kH weighting factors are all 1 (graphic arts)
    k_l = k_c = k_h = 1
    return math.sqrt(max(0.0,
        (d_l / k_l / s_l) ** 2
        + (d_c / k_c / s_c) ** 2
        + (d_h / k_h / s_h) ** 2
        + (r_t * d_c * d_h) / (k_c * s_c * k_h * s_h)
    ))


def mix_laba(rgba1: RgbaColor, rgba2: RgbaColor, ratio: float) -> RgbaColor:
    """Interpolate two colors in CIELAB; ratio 0 is the first, 1 the second."""
    laba1 = rgba_to_laba(rgba1)
    laba2 = rgba_to_laba(rgba2)
    mixture = clamp_laba(LabaColor(
        l=laba1.l * (1 - ratio) + laba2.l * ratio,
        a=laba1.a * (1 - ratio) + laba2.a * ratio,
        b=laba1.b * (1 - ratio) + laba2.b * ratio,
        alpha=laba1.alpha * (1 - ratio) + laba2.alpha * ratio,
    ))
    return laba_to_rgba(mixture)
