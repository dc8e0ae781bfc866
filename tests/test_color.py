import pytest

from colorkit import BaseColor, Color, RgbaColor, color


def test_parse_hex_and_rgb():
    assert Color("#f00").to_rgb() == RgbaColor(r=255, g=0, b=0, a=1)
    assert Color("rgb(0, 128, 255)").to_hex() == "#0080ff"
    assert Color("#ff000080").to_rgb_string() == "rgba(255, 0, 0, 0.5)"


def test_mixed_percentages_are_invalid():
    assert not Color("rgb(100%, 0, 0)").is_valid()


@pytest.mark.parametrize("code, expected", [
    ("hsl(120, 100%, 50%)", "#00ff00"),
    ("hsl(0.5turn 100% 50%)", "#00ffff"),
    ("hsl(200grad 100% 50%)", "#00ffff"),
    ("hsla(240, 100%, 50%, 0.5)", "#0000ff80"),
])
def test_parse_hsl(code, expected):
    assert Color(code).to_hex() == expected


def test_invalid_input_is_black():
    for value in (None, "", "nope", 12, {"foo": 1}):
        invalid = Color(value)
        assert not invalid.is_valid()
        assert invalid.format is None
        assert invalid.to_hex() == "#000000"


def test_color_accepts_handles():
    red = Color("red")
    assert color(red) is red
    assert color("#f00") == red
    assert isinstance(Color.coerce(BaseColor("#f00")), Color)


def test_conversions():
    red = Color("#ff0000")
    assert red.to_hsl().model_dump() == {"h": 0, "s": 100, "l": 50, "a": 1}
    assert red.to_hsv().model_dump() == {"h": 0, "s": 100, "v": 100, "a": 1}
    assert red.to_hsl_string() == "hsl(0, 100%, 50%)"


def test_brightness():
    assert Color("#000").brightness() == 0
    assert Color("#fff").brightness() == 1
    assert Color("#000").is_dark()
    assert Color("#fff").is_light()


def test_invert():
    assert Color("#ff0000").invert().to_hex() == "#00ffff"
    assert Color("#ff000080").invert().alpha() == 0.5


def test_alpha():
    red = Color("#ff0000")
    assert red.alpha() == 1
    assert red.set_alpha(0.5).to_hex() == "#ff000080"
    assert red.set_alpha(2).alpha() == 1
    assert red.set_alpha(-1).alpha() == 0


def test_lighten_and_darken():
    assert Color("#000").lighten(0.5).to_hex() == "#808080"
    assert Color("#fff").darken(0.5).to_hex() == "#808080"
    assert Color("#fff").lighten(0.5).to_hex() == "#ffffff"


def test_saturation():
    assert Color("#ff0000").grayscale().to_hex() == "#808080"
    assert Color("hsl(0, 50%, 50%)").saturate(0.5).to_hex() == "#ff0000"
    assert Color("hsl(0, 50%, 50%)").desaturate(0.5).to_hex() == "#808080"


def test_hue():
    assert Color("#00ff00").hue() == 120
    assert Color("#ff0000").set_hue(240).to_hex() == "#0000ff"
    assert Color("#ff0000").rotate(120).to_hex() == "#00ff00"
    assert Color("#ff0000").rotate(-120).to_hex() == "#0000ff"
    assert Color("#ff0000").rotate().hue() == 15


def test_manipulations_return_new_handles():
    red = Color("#ff0000")
    lighter = red.lighten(0.2)
    assert lighter is not red
    assert isinstance(lighter, Color)
    assert red.to_hex() == "#ff0000"


def test_equality():
    assert Color("#f00").is_equal("rgb(255, 0, 0)")
    assert Color("#f00").is_equal(Color("red"))
    assert not Color("#f00").is_equal("#f01")
    assert Color("#f00") == Color("red")
    assert len({Color("#f00"), Color("red")}) == 1


def test_repr():
    assert repr(Color("#f00")) == "Color('#ff0000')"
