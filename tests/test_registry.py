import pytest

from colorkit import Color, Plugin, RgbaColor, extend
from colorkit.errors import RegistryFrozenError
from colorkit.registry import ParserRegistry, create_registry


def _brand_plugin(name, rgba):
    def parse_brand(s):
        return rgba if s.lower() == "brand" else None

    def install(registry):
        registry.register_string_parser(parse_brand, name)

    return Plugin(name, install)


RED_BRAND = _brand_plugin("red-brand", RgbaColor(r=255, g=0, b=0))
BLUE_BRAND = _brand_plugin("blue-brand", RgbaColor(r=0, g=0, b=255))


def test_default_formats():
    assert create_registry().formats == ("hex", "rgb", "hsl", "hsv")


def test_parse_freezes_registry():
    registry = create_registry()
    assert not registry.frozen
    registry.parse("#fff")
    assert registry.frozen
    with pytest.raises(RegistryFrozenError):
        registry.register_string_parser(lambda s: None, "late")


def test_frozen_error_is_a_runtime_error():
    registry = ParserRegistry()
    registry.freeze()
    with pytest.raises(RuntimeError):
        registry.register_object_parser(lambda v: None, "late")


def test_extended_registry_is_frozen():
    Brand = extend(RED_BRAND)
    assert Brand.registry.frozen
    with pytest.raises(RegistryFrozenError):
        Brand.registry.register_string_parser(lambda s: None, "late")


def test_first_registered_parser_wins():
    assert extend(RED_BRAND, BLUE_BRAND)("brand").to_hex() == "#ff0000"
    assert extend(BLUE_BRAND, RED_BRAND)("brand").to_hex() == "#0000ff"
    assert extend(BLUE_BRAND, RED_BRAND)("brand").format == "blue-brand"


def test_duplicate_plugins_install_once():
    Brand = extend(RED_BRAND, RED_BRAND)
    assert Brand.plugins == ("red-brand",)
    assert Brand.registry.formats.count("red-brand") == 1


def test_builtin_parsers_come_before_plugins():
    Brand = extend(RED_BRAND)
    assert Brand.registry.formats[:4] == ("hex", "rgb", "hsl", "hsv")


def test_extend_keeps_base_registry_untouched():
    extend(RED_BRAND)
    assert "red-brand" not in Color.registry.formats


def test_unsupported_input_types():
    registry = create_registry()
    assert registry.parse(42) is None
    assert registry.parse(None) is None
    assert registry.parse(["#fff"]) is None
    assert registry.parse("not a color") is None


def test_strings_are_stripped():
    result = create_registry().parse("  #ff0000\n")
    assert result.format == "hex"
    assert result.rgba == RgbaColor(r=255, g=0, b=0)


@pytest.mark.parametrize("value, expected", [
    ({"r": 255, "g": 0, "b": 0}, "rgb"),
    ({"h": 0, "s": 100, "l": 50}, "hsl"),
    ({"h": 0, "s": 100, "v": 100}, "hsv"),
    ({"l": 50, "a": 0, "b": 0}, "lab"),
    ({"l": 50, "c": 30, "h": 120}, "lch"),
    ({"x": 50, "y": 50, "z": 50}, "xyz"),
    ({"h": 0, "w": 0, "b": 0}, "hwb"),
    ({"c": 0, "m": 100, "y": 0, "k": 0}, "cmyk"),
])
def test_object_dispatch(value, expected):
    assert Color(value).format == expected


@pytest.mark.parametrize("value", [
    {"r": 255, "g": 0},
    {"h": 0, "s": 100},
    {"r": "", "g": 0, "b": 0},
    {"r": True, "g": 0, "b": 0},
    {},
])
def test_incomplete_objects_are_invalid(value):
    assert not Color(value).is_valid()


@pytest.mark.parametrize("value, expected", [
    ("#ff0000", "hex"),
    ("rgb(255 0 0)", "rgb"),
    ("hsl(0 100% 50%)", "hsl"),
    ("lab(50% 0 0)", "lab"),
    ("lch(50% 30 120)", "lch"),
    ("hwb(0 0% 0%)", "hwb"),
    ("device-cmyk(0% 100% 0% 0%)", "cmyk"),
    ("red", "name"),
])
def test_string_dispatch(value, expected):
    assert Color(value).format == expected


def test_channel_models_are_accepted():
    assert Color(RgbaColor(r=0, g=128, b=0)).to_hex() == "#008000"
    assert Color(RgbaColor(r=0, g=128, b=0)).format == "rgb"
