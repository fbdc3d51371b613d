#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#
from enum import StrEnum

DEGREE_SIGN = "°"


class TemperatureUnit(StrEnum):
    """
    Enumeration of the supported temperature units.

    The value of each member is its one-character abbreviation, which is also the unit suffix
    recognized when parsing a temperature from text. Each member carries a display name.

    :cvar CELSIUS: Degrees Celsius, abbreviated "C".
    :cvar FAHRENHEIT: Degrees Fahrenheit, abbreviated "F".
    :cvar KELVIN: Kelvin, abbreviated "K".
    """
    CELSIUS = "C", "Celsius"
    FAHRENHEIT = "F", "Fahrenheit"
    KELVIN = "K", "kelvin"

    def __new__(cls, value: str, description: str = None):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.description = description
        return obj

    @property
    def abbreviation(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """
        Display symbol of the unit: the abbreviation preceded by a degree sign, except for kelvin.

        :return: The unit symbol, e.g. "°C" or "K".
        :rtype: str
        """
        if self is TemperatureUnit.KELVIN:
            return self.abbreviation
        return f"{DEGREE_SIGN}{self.abbreviation}"

    @classmethod
    def from_name(cls, name: str) -> "TemperatureUnit":
        """
        Lenient lookup of a unit by abbreviation or display name, case-insensitive.

        Accepts forms such as "C", "c", "°C", "celsius", "Kelvin". Surrounding whitespace is ignored.

        :param name: The unit name or abbreviation.
        :type name: str
        :return: The matching unit.
        :rtype: TemperatureUnit
        :raises ValueError: When no unit matches the given name.
        """
        key = (name or "").strip().removeprefix(DEGREE_SIGN).casefold()
        for unit in cls:
            if key in (unit.abbreviation.casefold(), unit.description.casefold()):
                return unit
        raise ValueError(f"unknown temperature unit '{name}', expected one of C, F, K")


class UnitType(StrEnum):
    """
    Represents a unit system for measurement.

    This class is an enumeration of the two used unit systems: Metric and Imperial. It is used to pick
    the preferred temperature unit for a locale.

    :cvar METRIC: The metric measurement system, commonly used worldwide.
    :cvar IMPERIAL: The imperial measurement system, primarily used in the United States.
    """
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def temperature_unit(self) -> TemperatureUnit:
        match self:
            case UnitType.IMPERIAL:
                return TemperatureUnit.FAHRENHEIT
            case _:
                return TemperatureUnit.CELSIUS
