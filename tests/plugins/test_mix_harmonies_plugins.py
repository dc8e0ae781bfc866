import pytest

from colorkit import Color


def test_mix_black_and_white():
    assert Color("#000").mix("#fff").to_hex() == "#777777"


def test_mix_ratio_extremes():
    assert Color("#ff0000").mix("#0000ff", 0).to_hex() == "#ff0000"
    assert Color("#ff0000").mix("#0000ff", 1).to_hex() == "#0000ff"


def test_mix_accepts_handles():
    assert Color("#000").mix(Color("#fff")).to_hex() == "#777777"


def test_tints_and_shades():
    tints = Color("#ff0000").tints(3)
    assert [c.to_hex() for c in tints][0] == "#ff0000"
    assert tints[-1].to_hex() == "#ffffff"
    shades = Color("#ff0000").shades()
    assert len(shades) == 5
    assert shades[-1].to_hex() == "#000000"
    assert Color("#ff0000").tones(4)[-1].to_hex() == "#808080"


def test_palette_needs_two_colors():
    with pytest.raises(ValueError):
        Color("#ff0000").tints(1)


def test_complementary():
    assert [c.to_hex() for c in Color("#ff0000").harmonies()] == ["#ff0000", "#00ffff"]


@pytest.mark.parametrize("kind, size", [
    ("analogous", 3),
    ("complementary", 2),
    ("double-split-complementary", 5),
    ("rectangle", 4),
    ("tetradic", 4),
    ("triadic", 3),
    ("split-complementary", 3),
])
def test_harmony_sizes(kind, size):
    assert len(Color("#3a6ea5").harmonies(kind)) == size


def test_triadic():
    assert [c.to_hex() for c in Color("#ff0000").harmonies("triadic")] == ["#ff0000", "#00ff00", "#0000ff"]


def test_unknown_harmony():
    with pytest.raises(ValueError):
        Color("#ff0000").harmonies("pentadic")
