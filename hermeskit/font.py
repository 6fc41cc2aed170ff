"""Built-in 8x16 bitmap font, font selection and software glyph drawing."""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass, field
from typing import Optional, Union

from .gpu_context import Rectangle

GLYPH_COLUMNS = 8
GLYPH_ROWS = 16
DEFAULT_GLYPH_WIDTH = 9
DEFAULT_GLYPH_HEIGHT = 16

# Code page 437, characters 0 to 127, one string of sixteen row bytes each.
# Bit n of a row byte is the pixel in column n, counted from the left.
_DEFAULT_FONT_ROWS = (
    # 0x00
    "00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00",
    "00 00 7e 81 a5 81 81 bd 99 81 81 7e 00 00 00 00",
    "00 00 7e ff db ff ff c3 e7 ff ff 7e 00 00 00 00",
    "00 00 00 00 36 7f 7f 7f 7f 3e 1c 08 00 00 00 00",
    "00 00 00 00 08 1c 3e 7f 3e 1c 08 00 00 00 00 00",
    "00 00 00 18 3c 3c e7 e7 e7 18 18 3c 00 00 00 00",
    "00 00 00 18 3c 7e ff ff 7e 18 18 3c 00 00 00 00",
    "00 00 00 00 00 00 18 3c 3c 18 00 00 00 00 00 00",
    "ff ff ff ff ff ff e7 c3 c3 e7 ff ff ff ff ff ff",
    "00 00 00 00 00 3c 66 42 42 66 3c 00 00 00 00 00",
    "ff ff ff ff ff c3 99 bd bd 99 c3 ff ff ff ff ff",
    "00 00 78 70 58 4c 1e 33 33 33 33 1e 00 00 00 00",
    "00 00 3c 66 66 66 66 3c 18 7e 18 18 00 00 00 00",
    "00 00 fc cc fc 0c 0c 0c 0c 0e 0f 07 00 00 00 00",
    "00 00 fe c6 fe c6 c6 c6 c6 e6 e7 67 03 00 00 00",
    "00 00 00 18 18 db 3c e7 3c db 18 18 00 00 00 00",
    # 0x10
    "00 01 03 07 0f 1f 7f 1f 0f 07 03 01 00 00 00 00",
    "00 40 60 70 78 7c 7f 7c 78 70 60 40 00 00 00 00",
    "00 00 18 3c 7e 18 18 18 7e 3c 18 00 00 00 00 00",
    "00 00 66 66 66 66 66 66 66 00 66 66 00 00 00 00",
    "00 00 fe db db db de d8 d8 d8 d8 d8 00 00 00 00",
    "00 3e 63 06 1c 36 63 63 36 1c 30 63 3e 00 00 00",
    "00 00 00 00 00 00 00 00 7f 7f 7f 7f 00 00 00 00",
    "00 00 18 3c 7e 18 18 18 7e 3c 18 7e 00 00 00 00",
    "00 00 18 3c 7e 18 18 18 18 18 18 18 00 00 00 00",
    "00 00 18 18 18 18 18 18 18 7e 3c 18 00 00 00 00",
    "00 00 00 00 00 18 30 7f 30 18 00 00 00 00 00 00",
    "00 00 00 00 00 0c 06 7f 06 0c 00 00 00 00 00 00",
    "00 00 00 00 00 00 03 03 03 7f 00 00 00 00 00 00",
    "00 00 00 00 00 24 66 ff 66 24 00 00 00 00 00 00",
    "00 00 00 00 08 1c 1c 3e 3e 7f 7f 00 00 00 00 00",
    "00 00 00 00 7f 7f 3e 3e 1c 1c 08 00 00 00 00 00",
    # 0x20
    "00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00",
    "00 00 18 3c 3c 3c 18 18 18 00 18 18 00 00 00 00",
    "00 66 66 66 24 00 00 00 00 00 00 00 00 00 00 00",
    "00 00 00 36 36 7f 36 36 36 7f 36 36 00 00 00 00",
    "18 18 3e 63 43 03 3e 60 60 61 63 3e 18 18 00 00",
    "00 00 00 00 43 63 30 18 0c 06 63 61 00 00 00 00",
    "00 00 1c 36 36 1c 6e 3b 33 33 33 6e 00 00 00 00",
    "00 0c 0c 0c 06 00 00 00 00 00 00 00 00 00 00 00",
    "00 00 30 18 0c 0c 0c 0c 0c 0c 18 30 00 00 00 00",
    "00 00 0c 18 30 30 30 30 30 30 18 0c 00 00 00 00",
    "00 00 00 00 00 66 3c ff 3c 66 00 00 00 00 00 00",
    "00 00 00 00 00 18 18 7e 18 18 00 00 00 00 00 00",
    "00 00 00 00 00 00 00 00 00 18 18 18 0c 00 00 00",
    "00 00 00 00 00 00 00 7f 00 00 00 00 00 00 00 00",
    "00 00 00 00 00 00 00 00 00 00 18 18 00 00 00 00",
    "00 00 00 00 40 60 30 18 0c 06 03 01 00 00 00 00",
    # 0x30
    "00 00 3c 66 c3 c3 db db c3 c3 66 3c 00 00 00 00",
    "00 00 18 1c 1e 18 18 18 18 18 18 7e 00 00 00 00",
    "00 00 3e 63 60 30 18 0c 06 03 63 7f 00 00 00 00",
    "00 00 3e 63 60 60 3c 60 60 60 63 3e 00 00 00 00",
    "00 00 30 38 3c 36 33 7f 30 30 30 78 00 00 00 00",
    "00 00 7f 03 03 03 3f 60 60 60 63 3e 00 00 00 00",
    "00 00 1c 06 03 03 3f 63 63 63 63 3e 00 00 00 00",
    "00 00 7f 63 60 60 30 18 0c 0c 0c 0c 00 00 00 00",
    "00 00 3e 63 63 63 3e 63 63 63 63 3e 00 00 00 00",
    "00 00 3e 63 63 63 7e 60 60 60 30 1e 00 00 00 00",
    "00 00 00 00 18 18 00 00 00 18 18 00 00 00 00 00",
    "00 00 00 00 18 18 00 00 00 18 18 0c 00 00 00 00",
    "00 00 00 60 30 18 0c 06 0c 18 30 60 00 00 00 00",
    "00 00 00 00 00 7e 00 00 7e 00 00 00 00 00 00 00",
    "00 00 00 06 0c 18 30 60 30 18 0c 06 00 00 00 00",
    "00 00 3e 63 63 30 18 18 18 00 18 18 00 00 00 00",
    # 0x40
    "00 00 00 3e 63 63 7b 7b 7b 3b 03 3e 00 00 00 00",
    "00 00 08 1c 36 63 63 7f 63 63 63 63 00 00 00 00",
    "00 00 3f 66 66 66 3e 66 66 66 66 3f 00 00 00 00",
    "00 00 3c 66 43 03 03 03 03 43 66 3c 00 00 00 00",
    "00 00 1f 36 66 66 66 66 66 66 36 1f 00 00 00 00",
    "00 00 7f 66 46 16 1e 16 06 46 66 7f 00 00 00 00",
    "00 00 7f 66 46 16 1e 16 06 06 06 0f 00 00 00 00",
    "00 00 3c 66 43 03 03 7b 63 63 66 5c 00 00 00 00",
    "00 00 63 63 63 63 7f 63 63 63 63 63 00 00 00 00",
    "00 00 3c 18 18 18 18 18 18 18 18 3c 00 00 00 00",
    "00 00 78 30 30 30 30 30 33 33 33 1e 00 00 00 00",
    "00 00 67 66 66 36 1e 1e 36 66 66 67 00 00 00 00",
    "00 00 0f 06 06 06 06 06 06 46 66 7f 00 00 00 00",
    "00 00 c3 e7 ff ff db c3 c3 c3 c3 c3 00 00 00 00",
    "00 00 63 67 6f 7f 7b 73 63 63 63 63 00 00 00 00",
    "00 00 3e 63 63 63 63 63 63 63 63 3e 00 00 00 00",
    # 0x50
    "00 00 3f 66 66 66 3e 06 06 06 06 0f 00 00 00 00",
    "00 00 3e 63 63 63 63 63 63 6b 7b 3e 30 70 00 00",
    "00 00 3f 66 66 66 3e 36 66 66 66 67 00 00 00 00",
    "00 00 3e 63 63 06 1c 30 60 63 63 3e 00 00 00 00",
    "00 00 ff db 99 18 18 18 18 18 18 3c 00 00 00 00",
    "00 00 63 63 63 63 63 63 63 63 63 3e 00 00 00 00",
    "00 00 c3 c3 c3 c3 c3 c3 c3 66 3c 18 00 00 00 00",
    "00 00 c3 c3 c3 c3 c3 db db ff 66 66 00 00 00 00",
    "00 00 c3 c3 66 3c 18 18 3c 66 c3 c3 00 00 00 00",
    "00 00 c3 c3 c3 66 3c 18 18 18 18 3c 00 00 00 00",
    "00 00 ff c3 61 30 18 0c 06 83 c3 ff 00 00 00 00",
    "00 00 3c 0c 0c 0c 0c 0c 0c 0c 0c 3c 00 00 00 00",
    "00 00 00 01 03 07 0e 1c 38 70 60 40 00 00 00 00",
    "00 00 3c 30 30 30 30 30 30 30 30 3c 00 00 00 00",
    "08 1c 36 63 00 00 00 00 00 00 00 00 00 00 00 00",
    "00 00 00 00 00 00 00 00 00 00 00 00 00 ff 00 00",
    # 0x60
    "0c 0c 18 00 00 00 00 00 00 00 00 00 00 00 00 00",
    "00 00 00 00 00 1e 30 3e 33 33 33 6e 00 00 00 00",
    "00 00 07 06 06 1e 36 66 66 66 66 3e 00 00 00 00",
    "00 00 00 00 00 3e 63 03 03 03 63 3e 00 00 00 00",
    "00 00 38 30 30 3c 36 33 33 33 33 6e 00 00 00 00",
    "00 00 00 00 00 3e 63 7f 03 03 63 3e 00 00 00 00",
    "00 00 1c 36 26 06 0f 06 06 06 06 0f 00 00 00 00",
    "00 00 00 00 00 6e 33 33 33 33 33 3e 30 33 1e 00",
    "00 00 07 06 06 36 6e 66 66 66 66 67 00 00 00 00",
    "00 00 18 18 00 1c 18 18 18 18 18 3c 00 00 00 00",
    "00 00 60 60 00 70 60 60 60 60 60 60 66 66 3c 00",
    "00 00 07 06 06 66 36 1e 1e 36 66 67 00 00 00 00",
    "00 00 1c 18 18 18 18 18 18 18 18 3c 00 00 00 00",
    "00 00 00 00 00 67 ff db db db db db 00 00 00 00",
    "00 00 00 00 00 3b 66 66 66 66 66 66 00 00 00 00",
    "00 00 00 00 00 3e 63 63 63 63 63 3e 00 00 00 00",
    # 0x70
    "00 00 00 00 00 3b 66 66 66 66 66 3e 06 06 0f 00",
    "00 00 00 00 00 6e 33 33 33 33 33 3e 30 30 78 00",
    "00 00 00 00 00 3b 6e 66 06 06 06 0f 00 00 00 00",
    "00 00 00 00 00 3e 63 06 1c 30 63 3e 00 00 00 00",
    "00 00 08 0c 0c 3f 0c 0c 0c 0c 6c 38 00 00 00 00",
    "00 00 00 00 00 33 33 33 33 33 33 6e 00 00 00 00",
    "00 00 00 00 00 c3 c3 c3 c3 66 3c 18 00 00 00 00",
    "00 00 00 00 00 c3 c3 c3 db db ff 66 00 00 00 00",
    "00 00 00 00 00 c3 66 3c 18 3c 66 c3 00 00 00 00",
    "00 00 00 00 00 63 63 63 63 63 63 7e 60 30 1f 00",
    "00 00 00 00 00 7f 33 18 0c 06 63 7f 00 00 00 00",
    "00 00 70 18 18 18 0e 18 18 18 18 70 00 00 00 00",
    "00 00 18 18 18 18 00 18 18 18 18 18 00 00 00 00",
    "00 00 0e 18 18 18 70 18 18 18 18 0e 00 00 00 00",
    "00 00 6e 3b 00 00 00 00 00 00 00 00 00 00 00 00",
    "00 00 00 00 08 1c 36 63 63 63 7f 00 00 00 00 00",
)

DEFAULT_FONT: tuple[bytes, ...] = tuple(bytes.fromhex(rows) for rows in _DEFAULT_FONT_ROWS)

Char = Union[int, str]


@dataclass
class Font:
    """A font selected for drawing text.

    Only the built-in bitmap font is rendered, so the path and size are kept
    for reference and the glyph cell is always 9 by 16 pixels.
    """

    path: Optional[str] = None
    size: int = 0
    glyph_width: int = field(default=DEFAULT_GLYPH_WIDTH, init=False)
    glyph_height: int = field(default=DEFAULT_GLYPH_HEIGHT, init=False)


_active_font: Optional[Font] = None


def activate_font(font: Optional[Font]) -> Optional[Font]:
    """Make ``font`` the active font and return the one it replaces."""
    global _active_font
    previous = _active_font
    _active_font = font
    return previous


def active_font() -> Optional[Font]:
    """Return the font currently used for drawing text."""
    return _active_font


def _char_code(c: Char) -> int:
    code = ord(c) if isinstance(c, str) else int(c)
    if code < 0 or code >= len(DEFAULT_FONT):
        return ord("?")
    return code


def glyph_rows(c: Char) -> bytes:
    """Return the sixteen row bytes of the built-in glyph for ``c``.

    Characters outside 0 to 127 are shown as a question mark.
    """
    return DEFAULT_FONT[_char_code(c)]


def draw_glyph(
    bits: MutableSequence[int],
    width: int,
    clip: Rectangle,
    x0: int,
    y0: int,
    c: Char,
    color: int,
) -> None:
    """Draw the built-in glyph for ``c`` with its top-left corner at ``(x0, y0)``.

    ``bits`` holds the pixels of a surface ``width`` pixels wide, row by row.
    Only pixels inside ``clip`` are touched; unset glyph pixels are left alone.
    """
    rows = glyph_rows(c)
    area = clip.intersection(Rectangle(x0, x0 + GLYPH_COLUMNS, y0, y0 + GLYPH_ROWS))
    for y in range(area.t, area.b):
        row = rows[y - y0]
        line = y * width
        for x in range(area.l, area.r):
            if row >> (x - x0) & 1:
                bits[line + x] = color