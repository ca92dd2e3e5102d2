"""Fixed 5x7 bitmap font for the OLED display."""

FONT_WIDTH = 5
FONT_HEIGHT = 7
CHAR_SPACING = 1

FIRST_CHAR = 32

# One glyph per printable character starting at space; each glyph is five
# column bytes with bit 0 at the top row.
_GLYPHS: tuple[bytes, ...] = (
    bytes((0x00, 0x00, 0x00, 0x00, 0x00)),  # space
    bytes((0x00, 0x00, 0x5F, 0x00, 0x00)),  # !
    bytes((0x00, 0x07, 0x00, 0x07, 0x00)),  # "
    bytes((0x14, 0x7F, 0x14, 0x7F, 0x14)),  # #
    bytes((0x24, 0x2A, 0x7F, 0x2A, 0x12)),  # $
    bytes((0x23, 0x13, 0x08, 0x64, 0x62)),  # %
    bytes((0x36, 0x49, 0x55, 0x22, 0x50)),  # &
    bytes((0x00, 0x05, 0x03, 0x00, 0x00)),  # '
    bytes((0x00, 0x1C, 0x22, 0x41, 0x00)),  # (
    bytes((0x00, 0x41, 0x22, 0x1C, 0x00)),  # )
    bytes((0x08, 0x2A, 0x1C, 0x2A, 0x08)),  # *
    bytes((0x08, 0x08, 0x3E, 0x08, 0x08)),  # +
    bytes((0x00, 0x50, 0x30, 0x00, 0x00)),  # ,
    bytes((0x08, 0x08, 0x08, 0x08, 0x08)),  # -
    bytes((0x00, 0x60, 0x60, 0x00, 0x00)),  # .
    bytes((0x20, 0x10, 0x08, 0x04, 0x02)),  # /
    bytes((0x3E, 0x51, 0x49, 0x45, 0x3E)),  # 0
    bytes((0x00, 0x42, 0x7F, 0x40, 0x00)),  # 1
    bytes((0x42, 0x61, 0x51, 0x49, 0x46)),  # 2
    bytes((0x21, 0x41, 0x45, 0x4B, 0x31)),  # 3
    bytes((0x18, 0x14, 0x12, 0x7F, 0x10)),  # 4
    bytes((0x27, 0x45, 0x45, 0x45, 0x39)),  # 5
    bytes((0x3C, 0x4A, 0x49, 0x49, 0x30)),  # 6
    bytes((0x01, 0x71, 0x09, 0x05, 0x03)),  # 7
    bytes((0x36, 0x49, 0x49, 0x49, 0x36)),  # 8
    bytes((0x06, 0x49, 0x49, 0x29, 0x1E)),  # 9
    bytes((0x00, 0x36, 0x36, 0x00, 0x00)),  # :
    bytes((0x00, 0x56, 0x36, 0x00, 0x00)),  # ;
    bytes((0x00, 0x08, 0x14, 0x22, 0x41)),  # <
    bytes((0x14, 0x14, 0x14, 0x14, 0x14)),  # =
    bytes((0x41, 0x22, 0x14, 0x08, 0x00)),  # >
    bytes((0x02, 0x01, 0x51, 0x09, 0x06)),  # ?
    bytes((0x32, 0x49, 0x79, 0x41, 0x3E)),  # @
    bytes((0x7E, 0x11, 0x11, 0x11, 0x7E)),  # A
    bytes((0x7F, 0x49, 0x49, 0x49, 0x36)),  # B
    bytes((0x3E, 0x41, 0x41, 0x41, 0x22)),  # C
    bytes((0x7F, 0x41, 0x41, 0x22, 0x1C)),  # D
    bytes((0x7F, 0x49, 0x49, 0x49, 0x41)),  # E
    bytes((0x7F, 0x09, 0x09, 0x01, 0x01)),  # F
    bytes((0x3E, 0x41, 0x41, 0x49, 0x7A)),  # G
    bytes((0x7F, 0x08, 0x08, 0x08, 0x7F)),  # H
    bytes((0x00, 0x41, 0x7F, 0x41, 0x00)),  # I
    bytes((0x20, 0x40, 0x41, 0x3F, 0x01)),  # J
    bytes((0x7F, 0x08, 0x14, 0x22, 0x41)),  # K
    bytes((0x7F, 0x40, 0x40, 0x40, 0x40)),  # L
    bytes((0x7F, 0x02, 0x04, 0x02, 0x7F)),  # M
    bytes((0x7F, 0x04, 0x08, 0x10, 0x7F)),  # N
    bytes((0x3E, 0x41, 0x41, 0x41, 0x3E)),  # O
    bytes((0x7F, 0x09, 0x09, 0x09, 0x06)),  # P
    bytes((0x3E, 0x41, 0x51, 0x21, 0x5E)),  # Q
    bytes((0x7F, 0x09, 0x19, 0x29, 0x46)),  # R
    bytes((0x46, 0x49, 0x49, 0x49, 0x31)),  # S
    bytes((0x01, 0x01, 0x7F, 0x01, 0x01)),  # T
    bytes((0x3F, 0x40, 0x40, 0x40, 0x3F)),  # U
    bytes((0x1F, 0x20, 0x40, 0x20, 0x1F)),  # V
    bytes((0x7F, 0x20, 0x18, 0x20, 0x7F)),  # W
    bytes((0x63, 0x14, 0x08, 0x14, 0x63)),  # X
    bytes((0x03, 0x04, 0x78, 0x04, 0x03)),  # Y
    bytes((0x61, 0x51, 0x49, 0x45, 0x43)),  # Z
    bytes((0x00, 0x00, 0x7F, 0x41, 0x41)),  # [
    bytes((0x02, 0x04, 0x08, 0x10, 0x20)),  # backslash
    bytes((0x41, 0x41, 0x7F, 0x00, 0x00)),  # ]
    bytes((0x04, 0x02, 0x01, 0x02, 0x04)),  # ^
    bytes((0x40, 0x40, 0x40, 0x40, 0x40)),  # _
    bytes((0x00, 0x01, 0x02, 0x04, 0x00)),  # `
    bytes((0x20, 0x54, 0x54, 0x54, 0x78)),  # a
    bytes((0x7F, 0x48, 0x44, 0x44, 0x38)),  # b
    bytes((0x38, 0x44, 0x44, 0x44, 0x20)),  # c
    bytes((0x38, 0x44, 0x44, 0x48, 0x7F)),  # d
    bytes((0x38, 0x54, 0x54, 0x54, 0x18)),  # e
    bytes((0x08, 0x7E, 0x09, 0x01, 0x02)),  # f
    bytes((0x08, 0x14, 0x54, 0x54, 0x3C)),  # g
    bytes((0x7F, 0x08, 0x04, 0x04, 0x78)),  # h
    bytes((0x00, 0x44, 0x7D, 0x40, 0x00)),  # i
    bytes((0x20, 0x40, 0x44, 0x3D, 0x00)),  # j
    bytes((0x00, 0x7F, 0x10, 0x28, 0x44)),  # k
    bytes((0x00, 0x41, 0x7F, 0x40, 0x00)),  # l
    bytes((0x7C, 0x04, 0x18, 0x04, 0x78)),  # m
    bytes((0x7C, 0x08, 0x04, 0x04, 0x78)),  # n
    bytes((0x38, 0x44, 0x44, 0x44, 0x38)),  # o
    bytes((0x7C, 0x14, 0x14, 0x14, 0x08)),  # p
    bytes((0x08, 0x14, 0x14, 0x18, 0x7C)),  # q
    bytes((0x7C, 0x08, 0x04, 0x04, 0x08)),  # r
    bytes((0x48, 0x54, 0x54, 0x54, 0x20)),  # s
    bytes((0x04, 0x3F, 0x44, 0x40, 0x20)),  # t
    bytes((0x3C, 0x40, 0x40, 0x20, 0x7C)),  # u
    bytes((0x1C, 0x20, 0x40, 0x20, 0x1C)),  # v
    bytes((0x3C, 0x40, 0x30, 0x40, 0x3C)),  # w
    bytes((0x44, 0x28, 0x10, 0x28, 0x44)),  # x
    bytes((0x0C, 0x50, 0x50, 0x50, 0x3C)),  # y
    bytes((0x44, 0x64, 0x54, 0x4C, 0x44)),  # z
    bytes((0x00, 0x08, 0x36, 0x41, 0x00)),  # {
    bytes((0x00, 0x00, 0x7F, 0x00, 0x00)),  # |
    bytes((0x00, 0x41, 0x36, 0x08, 0x00)),  # }
    bytes((0x08, 0x08, 0x2A, 0x1C, 0x08)),  # ~ drawn as a right arrow
)

LAST_CHAR = FIRST_CHAR + len(_GLYPHS) - 1


def glyph(char: str) -> bytes:
    """Return the five column bytes for a single printable character."""
    if not isinstance(char, str) or len(char) != 1:
        raise TypeError("glyph() expects a single character")
    code = ord(char)
    if not FIRST_CHAR <= code <= LAST_CHAR:
        raise ValueError(f"character {char!r} has no glyph in the font")
    return _GLYPHS[code - FIRST_CHAR]