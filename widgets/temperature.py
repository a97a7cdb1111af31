"""
Temperature converter between Celsius, Fahrenheit and Kelvin.
"""

from typing import Dict, Tuple

from .errors import WidgetInputError
from .parsing import parse_int, parse_number

KELVIN_OFFSET = 273.15

UNIT_SYMBOLS = {"C": "°C", "F": "°F", "K": "K"}

# Menu code -> (from unit, to unit)
CONVERSIONS: Dict[int, Tuple[str, str]] = {
    1: ("C", "F"),
    2: ("C", "K"),
    3: ("F", "C"),
    4: ("F", "K"),
    5: ("K", "C"),
    6: ("K", "F"),
}


def to_celsius(value: float, unit: str) -> float:
    if unit == "C":
        return value
    if unit == "F":
        return (value - 32) * 5 / 9
    if unit == "K":
        return value - KELVIN_OFFSET
    raise WidgetInputError(f"Unknown unit: {unit}")


def from_celsius(value: float, unit: str) -> float:
    if unit == "C":
        return value
    if unit == "F":
        return value * 9 / 5 + 32
    if unit == "K":
        return value + KELVIN_OFFSET
    raise WidgetInputError(f"Unknown unit: {unit}")


def convert(value, from_unit: str, to_unit: str) -> float:
    """Convert a temperature between any two of C, F, K."""
    number = parse_number(value, "temperature")
    from_unit, to_unit = from_unit.upper(), to_unit.upper()
    return from_celsius(to_celsius(number, from_unit), to_unit)


def convert_by_code(code, value) -> str:
    """
    Run one of the six menu conversions and describe the result,
    e.g. "100.0°C equals 212.0°F".

    Raises:
        WidgetInputError: unknown code or bad temperature.
    """
    option = parse_int(code, "conversion")
    if option not in CONVERSIONS:
        raise WidgetInputError("Invalid conversion option.")

    from_unit, to_unit = CONVERSIONS[option]
    number = parse_number(value, "temperature")
    result = convert(number, from_unit, to_unit)
    return f"{number:.1f}{UNIT_SYMBOLS[from_unit]} equals {result:.1f}{UNIT_SYMBOLS[to_unit]}"
