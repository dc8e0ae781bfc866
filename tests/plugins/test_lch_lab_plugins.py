import pytest

from colorkit import Color, LchaColor


def test_lch_string_round_trip():
    lch = Color("lch(29.2345% 44.2 27 / 0.6)").to_lch()
    assert lch.l == pytest.approx(29.23, abs=0.05)
    assert lch.c == pytest.approx(44.2, abs=0.05)
    assert lch.h == pytest.approx(27, abs=0.05)
    assert lch.a == pytest.approx(0.6)


def test_lch_of_grays_has_no_hue():
    assert Color("#808080").to_lch().c == 0
    assert Color("#808080").to_lch().h == 0


def test_lch_string():
    assert Color("#fff").to_lch_string() == "lch(100% 0 0)"
    assert Color("#000").to_lch_string() == "lch(0% 0 0)"
    assert Color("#000").set_alpha(0.5).to_lch_string() == "lch(0% 0 0 / 0.5)"


def test_lch_object_input():
    lch = LchaColor(l=50, c=30, h=120)
    parsed = Color(lch.model_dump())
    assert parsed.format == "lch"
    assert parsed.to_lch().h == pytest.approx(120, abs=0.1)


def test_lab_black_and_white():
    assert Color("#000").to_lab().model_dump() == {"l": 0, "a": 0, "b": 0, "alpha": 1}
    white = Color("#fff").to_lab()
    assert white.l == pytest.approx(100, abs=0.01)
    assert white.a == pytest.approx(0, abs=0.01)


def test_lab_string():
    assert Color("#000").to_lab_string() == "lab(0% 0 0)"
    for code in ("#ff0000", "#3a6ea5", "#00ff00"):
        assert Color(Color(code).to_lab_string()).to_hex() == code


def test_delta_identical_colors():
    assert Color("#3a6ea5").delta("#3a6ea5") == 0


def test_delta_black_and_white():
    assert Color("#000").delta("#fff") == pytest.approx(1, abs=0.01)


def test_delta_is_symmetric():
    pairs = [("#ff0000", "#00ff00"), ("#3a6ea5", "#a53a6e"), ("#808080", "#7f7f7f")]
    for first, second in pairs:
        assert Color(first).delta(second) == Color(second).delta(first)


def test_delta_defaults_to_white():
    assert Color("#000").delta() == Color("#000").delta("#fff")


def test_delta_is_small_for_close_colors():
    assert Color("#808080").delta("#818181") < 0.01


def test_high_precision_strings_stay_parseable():
    tiny = Color({"l": 50, "a": 0.00004, "b": 0.00002})
    for code in (tiny.to_lab_string(6), tiny.to_lab_string(10), tiny.to_lch_string(10)):
        assert "e-" not in code
        assert Color(code).is_valid()


@pytest.mark.parametrize("value", [
    {"l": 50, "a": 1e200, "b": 0},
    {"l": 50, "a": 0, "b": -1e200},
    {"l": 50, "c": 1e200, "h": 0},
    "lab(50% " + "9" * 120 + " 0)",
    "lab(50% 0 -" + "9" * 120 + ")",
    "lch(50% " + "9" * 120 + " 0)",
    "lch(50% " + "9" * 400 + " 90)",
])
def test_huge_lab_channels_do_not_raise(value):
    huge = Color(value)
    assert huge.is_valid()
    assert huge.to_hex().startswith("#")
