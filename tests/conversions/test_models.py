import pytest

from colorkit.models.cmyk import rgba_to_cmyka, cmyka_to_rgba
from colorkit.models.hsl import rgba_to_hsla
from colorkit.models.hsv import rgba_to_hsva, hsva_to_rgba
from colorkit.models.hwb import hwba_to_rgba, rgba_to_hwba, parse_hwba
from colorkit.models.lab import rgba_to_laba
from colorkit.models.lch import rgba_to_lcha
from colorkit.models.rgb import linearize_rgb_channel, unlinearize_rgb_channel
from colorkit.models.xyz import D50, M_D50_TO_D65, M_D65_TO_D50, rgba_to_xyza
from colorkit.types import CmykaColor, HsvaColor, HwbaColor, RgbaColor

tolerance = 1e-6


def test_rgb_clamps_on_construction():
    rgba = RgbaColor(r=300, g=-5, b=float("nan"), a=2)
    assert (rgba.r, rgba.g, rgba.b, rgba.a) == (255, 0, 0, 1)


def test_linearize_round_trip():
    for value in (0, 1, 10, 128, 200, 255):
        assert abs(unlinearize_rgb_channel(linearize_rgb_channel(value)) - value) < tolerance


def test_rgb_to_hsv_primaries():
    assert rgba_to_hsva(RgbaColor(r=255, g=0, b=0)) == HsvaColor(h=0, s=100, v=100, a=1)
    green = rgba_to_hsva(RgbaColor(r=0, g=255, b=0))
    assert green.h == 120
    blue = rgba_to_hsva(RgbaColor(r=0, g=0, b=255))
    assert blue.h == 240


def test_rgb_to_hsv_gray_has_no_hue():
    gray = rgba_to_hsva(RgbaColor(r=128, g=128, b=128))
    assert gray.h == 0
    assert gray.s == 0


def test_hsv_to_rgb_sectors():
    rgba = hsva_to_rgba(HsvaColor(h=180, s=100, v=100))
    assert (rgba.r, rgba.g, rgba.b) == (0, 255, 255)
    rgba = hsva_to_rgba(HsvaColor(h=300, s=100, v=100))
    assert (rgba.r, rgba.g, rgba.b) == (255, 0, 255)


def test_rgb_to_hsl():
    hsla = rgba_to_hsla(RgbaColor(r=255, g=0, b=0))
    assert (hsla.h, hsla.s, hsla.l) == (0, 100, 50)


def test_rgb_to_hwb():
    hwba = rgba_to_hwba(RgbaColor(r=255, g=128, b=0))
    assert hwba.w == 0
    assert hwba.b == 0
    hwba = rgba_to_hwba(RgbaColor(r=51, g=51, b=51))
    assert hwba.w == pytest.approx(20)
    assert hwba.b == pytest.approx(80)


def test_full_blackness_is_black_for_any_hue_and_whiteness():
    for h in (0, 90, 200, 359):
        for w in (0, 40, 100):
            rgba = hwba_to_rgba(HwbaColor(h=h, w=w, b=100))
            assert (rgba.r, rgba.g, rgba.b) == (0, 0, 0)


def test_parse_hwb_object_requires_every_channel():
    assert parse_hwba({"h": 0, "w": 0}) is None
    rgba = parse_hwba({"h": 0, "w": 0, "b": 0})
    assert (rgba.r, rgba.g, rgba.b) == (255, 0, 0)


def test_black_to_cmyk_has_no_ink_but_key():
    assert rgba_to_cmyka(RgbaColor(r=0, g=0, b=0)) == CmykaColor(c=0, m=0, y=0, k=100, a=1)


def test_cmyk_to_rgb():
    rgba = cmyka_to_rgba(CmykaColor(c=0, m=100, y=0, k=0))
    assert (rgba.r, rgba.g, rgba.b) == (255, 0, 255)
    rgba = cmyka_to_rgba(CmykaColor(c=0, m=0, y=0, k=50))
    assert (rgba.r, rgba.g, rgba.b) == (128, 128, 128)


def test_white_maps_to_d50():
    xyza = rgba_to_xyza(RgbaColor(r=255, g=255, b=255))
    assert xyza.x == pytest.approx(D50.x, abs=1e-3)
    assert xyza.y == pytest.approx(D50.y, abs=1e-3)
    assert xyza.z == pytest.approx(D50.z, abs=1e-3)


def test_adaptation_matrices_are_inverses():
    for i in range(3):
        for j in range(3):
            cell = sum(M_D50_TO_D65[i][k] * M_D65_TO_D50[k][j] for k in range(3))
            assert cell == pytest.approx(1 if i == j else 0, abs=1e-5)


def test_lab_of_black_and_white():
    black = rgba_to_laba(RgbaColor(r=0, g=0, b=0))
    assert black.l == pytest.approx(0, abs=1e-9)
    white = rgba_to_laba(RgbaColor(r=255, g=255, b=255))
    assert white.l == pytest.approx(100, abs=1e-3)
    assert white.a == pytest.approx(0, abs=1e-3)
    assert white.b == pytest.approx(0, abs=1e-3)


def test_lch_of_gray_has_no_hue():
    for value in (30, 128, 200):
        lcha = rgba_to_lcha(RgbaColor(r=value, g=value, b=value))
        assert lcha.c == 0
        assert lcha.h == 0


def test_alpha_passes_through():
    rgba = RgbaColor(r=10, g=20, b=30, a=0.25)
    assert rgba_to_laba(rgba).alpha == 0.25
    assert rgba_to_lcha(rgba).a == 0.25
    assert rgba_to_cmyka(rgba).a == 0.25
    assert rgba_to_xyza(rgba).a == 0.25
