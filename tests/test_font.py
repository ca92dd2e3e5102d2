import pytest

from picosynth.font import FIRST_CHAR, FONT_HEIGHT, FONT_WIDTH, LAST_CHAR, glyph


def _printable():
    return [chr(c) for c in range(FIRST_CHAR, LAST_CHAR + 1)]


def test_glyph_for_capital_a_matches_table():
    assert glyph("A") == bytes((0x7E, 0x11, 0x11, 0x11, 0x7E))


def test_glyph_for_zero_matches_table():
    assert glyph("0") == bytes((0x3E, 0x51, 0x49, 0x45, 0x3E))


def test_space_is_blank():
    assert glyph(" ") == bytes(FONT_WIDTH)


@pytest.mark.parametrize("char", _printable())
def test_every_glyph_has_font_width_columns(char):
    assert len(glyph(char)) == FONT_WIDTH


@pytest.mark.parametrize("char", _printable())
def test_every_glyph_fits_font_height(char):
    assert all(column < (1 << FONT_HEIGHT) for column in glyph(char))


@pytest.mark.parametrize(
    "char,expected",
    [
        ("B", (0x7F, 0x49, 0x49, 0x49, 0x36)),
        ("C", (0x3E, 0x41, 0x41, 0x41, 0x22)),
        ("x", (0x44, 0x28, 0x10, 0x28, 0x44)),
        ("y", (0x0C, 0x50, 0x50, 0x50, 0x3C)),
        ("z", (0x44, 0x64, 0x54, 0x4C, 0x44)),
        ("1", (0x00, 0x42, 0x7F, 0x40, 0x00)),
        ("9", (0x06, 0x49, 0x49, 0x29, 0x1E)),
    ],
)
def test_printable_letters_match_table(char, expected):
    assert glyph(char) == bytes(expected)


def test_control_character_is_rejected():
    with pytest.raises(ValueError):
        glyph("\n")


def test_character_past_table_is_rejected():
    with pytest.raises(ValueError):
        glyph(chr(LAST_CHAR + 1))


def test_multi_character_string_is_rejected():
    with pytest.raises(TypeError):
        glyph("ab")


def test_empty_string_is_rejected():
    with pytest.raises(TypeError):
        glyph("")