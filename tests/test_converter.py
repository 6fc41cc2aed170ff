import math

import pytest

from hermeskit.converter import (
    CATEGORIES,
    Category,
    Unit,
    calculate,
    convert,
    parse_leading_float,
)

LENGTH, TEMPERATURE = CATEGORIES
MM, METERS, KM, YARDS = LENGTH.units
CELSIUS, FAHRENHEIT = TEMPERATURE.units


def test_categories_from_source():
    assert [c.name for c in CATEGORIES] == ["Length", "Temperature"]
    assert [u.name for u in TEMPERATURE.units] == ["Celsius", "Fahrenheit"]
    assert calculate(TEMPERATURE, 1, 0, "32") == "0.000000 Celsius"


def test_unit_default_bias():
    assert Unit("Meters (m)", 1.0).bias == 0.0


def test_meters_to_kilometers():
    assert convert(1000.0, METERS, KM) == pytest.approx(1.0)


def test_boiling_point_in_fahrenheit():
    assert convert(100.0, CELSIUS, FAHRENHEIT) == pytest.approx(212.0, abs=1e-6)


def test_freezing_point_is_bias():
    assert convert(0.0, CELSIUS, FAHRENHEIT) == pytest.approx(FAHRENHEIT.bias)


@pytest.mark.parametrize("category", CATEGORIES)
@pytest.mark.parametrize("value", [-40.0, 0.0, 3.5, 1234.25])
def test_round_trip(category, value):
    for a in category.units:
        for b in category.units:
            assert convert(convert(value, a, b), b, a) == pytest.approx(value, abs=1e-9)


def test_same_unit_is_identity():
    assert convert(12.5, YARDS, YARDS) == pytest.approx(12.5)


@pytest.mark.parametrize(
    "text, expected",
    [("12abc", 12.0), ("  -3.5", -3.5), ("abc", 0.0), ("", 0.0), (".5", 0.5), ("7e2x", 700.0)],
)
def test_parse_leading_float(text, expected):
    assert parse_leading_float(text) == expected


def test_parse_special_values():
    assert parse_leading_float("-inf") == -math.inf
    assert math.isnan(parse_leading_float("nan"))


def test_parse_hexadecimal():
    assert parse_leading_float("0x10") == 16.0


def test_calculate_requires_selection():
    assert calculate(None, None, None, "1") == "Select units to convert."
    assert calculate(LENGTH, 0, None, "1") == "Select units to convert."


def test_calculate_requires_input():
    assert calculate(LENGTH, 0, 1, "") == "Enter value to convert."


def test_calculate_formats_result():
    assert calculate(LENGTH, 1, 0, "1") == "1000.000000 Millimeters (mm)"


def test_calculate_names_target_unit():
    result = calculate(TEMPERATURE, 0, 1, "25")
    assert result.endswith(" Fahrenheit")
    value = float(result.split()[0])
    assert value == pytest.approx(convert(25.0, CELSIUS, FAHRENHEIT), abs=1e-6)


def test_calculate_bad_index():
    with pytest.raises(IndexError):
        calculate(Category("Empty", ()), 0, 0, "1")