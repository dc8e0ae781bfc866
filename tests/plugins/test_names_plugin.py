from colorkit import Color


def test_named_colors():
    assert Color("red").to_hex() == "#ff0000"
    assert Color("RebeccaPurple").to_hex() == "#663399"
    assert Color(" Grey ").to_hex() == "#808080"


def test_transparent():
    transparent = Color("transparent")
    assert transparent.is_valid()
    assert transparent.alpha() == 0


def test_to_name():
    assert Color("#ff0000").to_name() == "red"
    assert Color("#808080").to_name() == "gray"
    assert Color("#123456").to_name() is None


def test_unknown_name():
    assert not Color("blurple").is_valid()
