import pytest

from mindweave.palette import Color, custom_palette, standard_palette


def test_standard_palette_size_and_first_entry():
    palette = standard_palette()
    assert len(palette) == 48
    assert palette[0] == Color.from_hex("#ef2929")


def test_custom_palette_size_and_entries():
    palette = custom_palette()
    assert len(palette) == 16
    assert palette[0].to_hex() == "#ffffff"
    assert palette[-1].to_hex() == "#9b9c82"


def test_palettes_are_fresh_lists():
    first = standard_palette()
    first.clear()
    assert len(standard_palette()) == 48


def test_from_hex_is_case_insensitive():
    assert Color.from_hex("#8AE234") == Color.from_hex("#8ae234")


def test_short_form_expands():
    assert Color.from_hex("#fff") == Color(255, 255, 255)


@pytest.mark.parametrize("color", standard_palette() + custom_palette())
def test_hex_round_trip(color):
    assert Color.from_hex(color.to_hex()) == color


def test_to_hex_is_lower_case():
    assert Color.from_hex("#AD7FA8").to_hex() == "#ad7fa8"


@pytest.mark.parametrize("text", ["", "#", "ef2929", "#ef292", "#gggggg", "#ef29291"])
def test_invalid_hex_raises(text):
    with pytest.raises(ValueError):
        Color.from_hex(text)


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_channel_out_of_range_raises(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_standard_palette_grey_column_and_last_entry():
    palette = standard_palette()
    assert palette[3] == Color(0x11, 0x11, 0x11)
    assert palette[9] == Color(0x33, 0x33, 0x33)
    assert palette[-1] == Color(255, 255, 255)