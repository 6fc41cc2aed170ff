"""Unit conversion between units of the same physical category."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

_INPUT_LIMIT = 63
_OUTPUT_LIMIT = 63

_HEX = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
)
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPECIAL = re.compile(r"([+-]?)(infinity|inf|nan)", re.IGNORECASE)


@dataclass(frozen=True)
class Unit:
    """A unit given by its ratio to the category's base unit and an offset."""

    name: str
    ratio: float
    bias: float = 0.0


@dataclass(frozen=True)
class Category:
    """A named group of mutually convertible units."""

    name: str
    units: tuple[Unit, ...]


CATEGORIES: tuple[Category, ...] = (
    Category(
        "Length",
        (
            Unit("Millimeters (mm)", 0.001),
            Unit("Meters (m)", 1.0),
            Unit("Kilometers (km)", 1000.0),
            Unit("Yards", 0.9144),
        ),
    ),
    Category(
        "Temperature",
        (
            Unit("Celsius", 1.0),
            Unit("Fahrenheit", 0.555555555556, 32.0),
        ),
    ),
)


def _truncate(text: str, limit: int) -> str:
    return text.encode("utf-8")[:limit].decode("utf-8", errors="ignore")


def parse_leading_float(text: str) -> float:
    """Read the number at the start of ``text``, ignoring anything after it.

    Leading white space is skipped; text that starts with no number reads as 0.
    """
    stripped = text.lstrip(" \t\n\r\f\v")
    special = _SPECIAL.match(stripped)
    if special:
        value = math.inf if special.group(2).lower().startswith("inf") else math.nan
        return -value if special.group(1) == "-" else value
    hexadecimal = _HEX.match(stripped)
    if hexadecimal:
        return float.fromhex(hexadecimal.group())
    decimal = _DECIMAL.match(stripped)
    if decimal:
        return float(decimal.group())
    return 0.0


def convert(value: float, unit_from: Unit, unit_to: Unit) -> float:
    """Convert ``value`` expressed in ``unit_from`` into ``unit_to``."""
    return (value - unit_from.bias) * unit_from.ratio / unit_to.ratio + unit_to.bias


def calculate(
    category: Optional[Category],
    from_index: Optional[int],
    to_index: Optional[int],
    text: str,
) -> str:
    """Return the converter's output line for the current selection and input."""
    if category is None or from_index is None or to_index is None:
        return "Select units to convert."
    if not text:
        return "Enter value to convert."
    unit_from = category.units[from_index]
    unit_to = category.units[to_index]
    value = convert(parse_leading_float(_truncate(text, _INPUT_LIMIT)), unit_from, unit_to)
    return _truncate(f"{value:f} {unit_to.name}", _OUTPUT_LIMIT)