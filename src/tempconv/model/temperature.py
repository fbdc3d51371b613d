#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#
import math
import re

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

from .units import TemperatureUnit, DEGREE_SIGN

ABSOLUTE_ZERO_CELSIUS = 273.15
FAHRENHEIT_OFFSET = 32.0
FAHRENHEIT_FACTOR = 1.8     # 9/5

# decimal literal: optional sign, digits with optional fraction, optional exponent
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class InvalidTemperature(ValueError):
    """
    Raised when a temperature cannot be constructed: it lies below absolute zero or its value is not finite.

    :ivar value: The rejected numeric value.
    :type value: float
    :ivar unit: The unit the value was given in.
    :type unit: TemperatureUnit
    """
    def __init__(self, value: float, unit: TemperatureUnit, reason: str = "below absolute zero (0K)"):
        super().__init__(f"temperature {value} {unit.description} is {reason}")
        self.value = value
        self.unit = unit


class ParseErrorKind(StrEnum):
    EMPTY = "empty"
    MISSING_UNIT = "missing_unit"
    INVALID_UNIT = "invalid_unit"
    INVALID_NUMBER = "invalid_number"
    BELOW_ABSOLUTE_ZERO = "below_absolute_zero"


class TemperatureParseError(ValueError):
    """
    Raised when a text cannot be parsed into a temperature.

    :ivar kind: The reason of the failure.
    :type kind: ParseErrorKind
    :ivar text: The text that failed to parse.
    :type text: str
    :ivar unit_char: The offending unit character, set only for ``ParseErrorKind.INVALID_UNIT``.
    :type unit_char: str | None
    """
    def __init__(self, kind: ParseErrorKind, text: str, unit_char: str | None = None):
        match kind:
            case ParseErrorKind.EMPTY:
                message = "cannot parse a temperature from an empty string"
            case ParseErrorKind.MISSING_UNIT:
                message = f"missing temperature unit in '{text}', expected a C, F or K suffix"
            case ParseErrorKind.INVALID_UNIT:
                message = f"invalid temperature unit '{unit_char}', expected one of C, F, K"
            case ParseErrorKind.INVALID_NUMBER:
                message = f"invalid temperature value '{text}'"
            case _:
                message = f"temperature '{text}' is below absolute zero (0K)"
        super().__init__(message)
        self.kind = kind
        self.text = text
        self.unit_char = unit_char


def convert_temperature(value: float, current_unit: TemperatureUnit, new_unit: TemperatureUnit) -> float:
    """
    Convert a bare temperature value between units.

    Only the conversions to and from Celsius have their own formula; Fahrenheit and kelvin convert into
    each other through Celsius, rounding twice.

    :param value: The numeric value to be converted.
    :type value: float
    :param current_unit: The unit of the value.
    :type current_unit: TemperatureUnit
    :param new_unit: The desired unit to convert to.
    :type new_unit: TemperatureUnit
    :return: The converted value.
    :rtype: float
    """
    if current_unit == new_unit:
        return value
    match current_unit, new_unit:
        case TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT:
            return value * FAHRENHEIT_FACTOR + FAHRENHEIT_OFFSET
        case TemperatureUnit.CELSIUS, TemperatureUnit.KELVIN:
            return value + ABSOLUTE_ZERO_CELSIUS
        case TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS:
            return (value - FAHRENHEIT_OFFSET) * 5.0 / 9.0
        case TemperatureUnit.KELVIN, TemperatureUnit.CELSIUS:
            return value - ABSOLUTE_ZERO_CELSIUS
        case _:
            celsius = convert_temperature(value, current_unit, TemperatureUnit.CELSIUS)
            return convert_temperature(celsius, TemperatureUnit.CELSIUS, new_unit)


def format_value(value: float) -> str:
    """
    Render a float as its shortest round-trippable decimal, without exponent and without a trailing ".0".

    :param value: The value to render.
    :type value: float
    :return: The rendered value, e.g. "100" for 100.0 and "37.5" for 37.5.
    :rtype: str
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True, slots=True)
class Temperature:
    """
    An immutable temperature value tagged with its unit.

    Instances are meant to be obtained through :func:`construct` or :func:`parse`, which enforce that the
    temperature is not below absolute zero. Conversions always succeed and return new instances.

    Attributes:
        value: The numeric value of the temperature.
        unit: The unit of the value.
    """
    value: float
    unit: TemperatureUnit

    def to(self, unit: TemperatureUnit) -> "Temperature":
        """
        Convert this temperature to the given unit.

        :param unit: The unit to which the temperature will be converted.
        :type unit: TemperatureUnit
        :return: A new Temperature in the requested unit.
        :rtype: Temperature
        """
        return Temperature(convert_temperature(self.value, self.unit, unit), unit)

    def json_encode(self):
        return {
            "__type__": "Temperature",
            "value": self.value,
            "unit": self.unit.value,
        }

    @staticmethod
    def json_decode(obj):
        if "__type__" in obj and obj["__type__"] == "Temperature":
            unit = TemperatureUnit(obj.get("unit"))
            value = obj.get("value")
            # bool is an int, but not a temperature
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidTemperature(value, unit, reason="not a number")
            return construct(value, unit)
        return None

    def __str__(self) -> str:
        return format_temperature(self)


def construct(value: float, unit: TemperatureUnit) -> Temperature:
    """
    Build a temperature, rejecting values below absolute zero and non-finite values.

    :param value: The numeric value of the temperature.
    :type value: float
    :param unit: The unit of the value.
    :type unit: TemperatureUnit
    :return: The temperature, with value and unit unchanged.
    :rtype: Temperature
    :raises InvalidTemperature: When the value is NaN or infinite, or lies below 0K once converted to kelvin.
    """
    temperature = Temperature(float(value), unit)
    if not math.isfinite(temperature.value):
        raise InvalidTemperature(temperature.value, unit, reason="not a finite number")
    if temperature.to(TemperatureUnit.KELVIN).value < 0.0:
        raise InvalidTemperature(temperature.value, unit)
    return temperature


def convert(temperature: Temperature, unit: TemperatureUnit) -> Temperature:
    return temperature.to(unit)


def parse_value(text: str) -> float:
    """
    Parse the numeric part of a temperature.

    :param text: A decimal literal such as "-40", "37.5" or "1e2"; surrounding whitespace is ignored.
    :type text: str
    :return: The parsed value.
    :rtype: float
    :raises TemperatureParseError: With ``INVALID_NUMBER`` when the text is not a finite decimal number.
    """
    number = text.strip()
    if not _NUMBER_PATTERN.fullmatch(number):
        raise TemperatureParseError(ParseErrorKind.INVALID_NUMBER, text)
    value = float(number)
    if not math.isfinite(value):
        raise TemperatureParseError(ParseErrorKind.INVALID_NUMBER, text)
    return value


def parse(text: str) -> Temperature:
    """
    Parse a temperature from text of the form ``<number><unit>``, e.g. "25C", " 273.15K " or "98.6°F".

    The last character is the unit and must be exactly one of "C", "F" or "K". The rest, trimmed and
    without an optional trailing degree sign, is the number.

    :param text: The text to parse.
    :type text: str
    :return: The parsed temperature.
    :rtype: Temperature
    :raises TemperatureParseError: When the text is empty, lacks or has an unknown unit, has an invalid
        number, or describes a temperature below absolute zero.
    """
    trimmed = text.strip()
    if not trimmed:
        raise TemperatureParseError(ParseErrorKind.EMPTY, text)
    if len(trimmed) < 2:
        raise TemperatureParseError(ParseErrorKind.MISSING_UNIT, text)

    unit_char = trimmed[-1]
    try:
        unit = TemperatureUnit(unit_char)
    except ValueError:
        raise TemperatureParseError(ParseErrorKind.INVALID_UNIT, text, unit_char) from None

    number = trimmed[:-1].strip()
    if number.endswith(DEGREE_SIGN):
        number = number[:-1].strip()
    value = parse_value(number)

    try:
        return construct(value, unit)
    except InvalidTemperature:
        raise TemperatureParseError(ParseErrorKind.BELOW_ABSOLUTE_ZERO, text) from None


def format_temperature(temperature: Temperature) -> str:
    """
    Display form of a temperature: "300K" for kelvin, "25°C" and "77°F" otherwise.

    :param temperature: The temperature to render.
    :type temperature: Temperature
    :return: The value followed by the unit symbol.
    :rtype: str
    """
    return f"{format_value(temperature.value)}{temperature.unit.symbol}"


ABSOLUTE_ZERO = construct(0.0, TemperatureUnit.KELVIN)
BOILING_POINT = construct(100.0, TemperatureUnit.CELSIUS)
FREEZING_POINT = construct(0.0, TemperatureUnit.CELSIUS)
