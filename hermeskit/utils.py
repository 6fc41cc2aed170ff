"""Numeric, colour and UTF-8 helpers used across the toolkit."""

from __future__ import annotations

import struct
from typing import NamedTuple, Optional, Union

MAX_CODE_POINT = 0x10FFFF

BytesLike = Union[bytes, bytearray, memoryview, str]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _float32_bits(x: float) -> int:
    return struct.unpack("<I", struct.pack("<f", x))[0]


def _bits_float32(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & 0xFFFFFFFF))[0]


def floor_float(x: float) -> float:
    """Round a single-precision value down to the nearest integer."""
    bits = _float32_bits(x)
    sign = bits & 0x80000000
    exponent = ((bits >> 23) & 0xFF) - 0x7F

    if exponent >= 23:
        pass  # No bits are left for a fractional part.
    elif exponent >= 0:
        mask = 0x7FFFFF >> exponent
        if not mask & bits:
            return _bits_float32(bits)
        if sign:
            bits = (bits + mask) & 0xFFFFFFFF
        bits &= ~mask & 0xFFFFFFFF
    else:
        return -1.0 if sign else 0.0

    return _bits_float32(bits)


def linear_map(value: float, in_from: float, in_to: float, out_from: float, out_to: float) -> float:
    """Map ``value`` from one range onto another, linearly."""
    in_range = in_to - in_from
    out_range = out_to - out_from
    normalised = (value - in_from) / in_range
    return normalised * out_range + out_from


def color_from_float(r: float, g: float, b: float) -> int:
    """Pack red, green and blue in ``[0, 1]`` into a 0xRRGGBB integer."""
    return ((int(r * 255.0) << 16) | (int(g * 255.0) << 8) | int(b * 255.0)) & 0xFFFFFFFF


def color_from_rgba_float(r: float, g: float, b: float, a: float) -> int:
    """Pack red, green, blue and alpha in ``[0, 1]`` into a 0xAARRGGBB integer."""
    return (color_from_float(r, g, b) | (int(a * 255.0) << 24)) & 0xFFFFFFFF


class HSV(NamedTuple):
    """A colour in hue (0 to 6), saturation and value form."""

    hue: Optional[float]
    saturation: float
    value: float


def color_to_hsv(rgb: int) -> HSV:
    """Split a 0xRRGGBB colour into hue, saturation and value.

    The hue is ``None`` for greys, which have no hue.
    """
    r = ((rgb >> 16) & 0xFF) / 255.0
    g = ((rgb >> 8) & 0xFF) / 255.0
    b = (rgb & 0xFF) / 255.0

    maximum = max(r, g, b)
    minimum = min(r, g, b)
    difference = maximum - minimum

    if not difference:
        return HSV(None, 0.0, maximum)

    hue = 0.0
    if r == maximum:
        hue = (g - b) / difference + 0
    if g == maximum:
        hue = (b - r) / difference + 2
    if b == maximum:
        hue = (r - g) / difference + 4
    if hue < 0:
        hue += 6
    return HSV(hue, difference / maximum, maximum)


def hsv_to_rgb(h: float, s: float, v: float) -> int:
    """Combine hue (0 to 6), saturation and value into a 0xRRGGBB colour."""
    if not s:
        return color_from_float(v, v, v)

    whole = int(h)
    sector = abs(whole) % 6 * (1 if whole >= 0 else -1)
    f = h - floor_float(h)
    x = v * (1 - s)
    y = v * (1 - s * f)
    z = v * (1 - s * (1 - f))

    if sector == 0:
        r, g, b = v, z, x
    elif sector == 1:
        r, g, b = y, v, x
    elif sector == 2:
        r, g, b = x, v, z
    elif sector == 3:
        r, g, b = x, y, v
    elif sector == 4:
        r, g, b = z, x, v
    else:
        r, g, b = v, x, y
    return color_from_float(r, g, b)


def utf8_code_point(data: BytesLike) -> tuple[Optional[int], int]:
    """Decode the first character of ``data``.

    Returns the code point, or ``None`` for a malformed sequence, together
    with the number of bytes consumed.
    """
    raw = _as_bytes(data)
    if not raw:
        raise ValueError("cannot decode a code point from empty data")

    first = raw[0]
    consumed = 1
    if first & 0xF0 == 0xF0:
        extra = 3
    elif first & 0xE0 == 0xE0:
        extra = 2
    elif first & 0xC0 == 0xC0:
        extra = 1
    elif first & 0x7F:
        return (None if first & 0x80 else first), consumed
    else:
        return None, consumed

    if len(raw) < extra + 1:
        return None, consumed

    code_point = (first & (0x3F >> extra)) << (6 * extra)
    for position, byte in enumerate(raw[1 : extra + 1], start=1):
        if byte & 0xC0 != 0x80:
            return None, consumed
        code_point |= (byte & 0x3F) << (6 * (extra - position))
        consumed += 1

    if code_point > MAX_CODE_POINT:
        return None, consumed
    return code_point, consumed


def utf8_previous_char(data: BytesLike, offset: int) -> int:
    """Return the byte offset of the character that ends just before ``offset``."""
    raw = _as_bytes(data)
    if offset == 0:
        return 0
    previous = offset - 1
    while previous > 0 and raw[previous] & 0xC0 == 0x80:
        previous -= 1
    return previous


def utf8_char_bytes(data: BytesLike) -> int:
    """Return the byte length of the first character of ``data``."""
    raw = _as_bytes(data)
    if not raw:
        return 0
    return utf8_code_point(raw)[1]


def utf8_string_length(data: BytesLike) -> int:
    """Count the characters in ``data``, malformed bytes counting one each."""
    raw = _as_bytes(data)
    length = 0
    index = 0
    while index < len(raw):
        index += utf8_code_point(raw[index:])[1]
        length += 1
    return length


def _skip_tab(column: int, rest: bytes, tab_size: int) -> int:
    if utf8_code_point(rest)[0] == ord("\t"):
        while column % tab_size:
            column += 1
    return column


def byte_to_column(text: BytesLike, byte: int, tab_size: int) -> int:
    """Return the display column of byte offset ``byte``, expanding tabs."""
    raw = _as_bytes(text)
    column = 0
    index = 0
    while index < byte and index < len(raw):
        column += 1
        column = _skip_tab(column, raw[index:], tab_size)
        index += utf8_char_bytes(raw[index:byte])
    return column


def column_to_byte(text: BytesLike, column: int, tab_size: int) -> int:
    """Return the byte offset shown at display column ``column``, expanding tabs."""
    raw = _as_bytes(text)
    byte = 0
    current = 0
    while byte < len(raw):
        current += 1
        current = _skip_tab(current, raw[byte:], tab_size)
        if column < current:
            break
        byte += utf8_char_bytes(raw[byte:])
    return byte