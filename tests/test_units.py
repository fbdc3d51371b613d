"""
Tests for the unit enumerations.
"""

import pytest

from tempconv.model.units import TemperatureUnit, UnitType


class TestTemperatureUnit:
    def test_exactly_three_units(self) -> None:
        assert [u.abbreviation for u in TemperatureUnit] == ["C", "F", "K"]

    @pytest.mark.parametrize("unit, description", [
        (TemperatureUnit.CELSIUS, "Celsius"),
        (TemperatureUnit.FAHRENHEIT, "Fahrenheit"),
        (TemperatureUnit.KELVIN, "kelvin"),
    ])
    def test_description(self, unit, description) -> None:
        assert unit.description == description

    def test_symbol(self) -> None:
        assert TemperatureUnit.CELSIUS.symbol == "°C"
        assert TemperatureUnit.FAHRENHEIT.symbol == "°F"
        assert TemperatureUnit.KELVIN.symbol == "K"

    def test_lookup_by_abbreviation_is_strict(self) -> None:
        assert TemperatureUnit("K") is TemperatureUnit.KELVIN
        with pytest.raises(ValueError):
            TemperatureUnit("k")

    @pytest.mark.parametrize("name, unit", [
        ("C", TemperatureUnit.CELSIUS),
        ("c", TemperatureUnit.CELSIUS),
        ("°C", TemperatureUnit.CELSIUS),
        (" celsius ", TemperatureUnit.CELSIUS),
        ("Fahrenheit", TemperatureUnit.FAHRENHEIT),
        ("f", TemperatureUnit.FAHRENHEIT),
        ("KELVIN", TemperatureUnit.KELVIN),
        ("k", TemperatureUnit.KELVIN),
    ])
    def test_from_name(self, name, unit) -> None:
        assert TemperatureUnit.from_name(name) is unit

    @pytest.mark.parametrize("name", ["", "X", "centigrade", "°K°", None])
    def test_from_name_unknown(self, name) -> None:
        with pytest.raises(ValueError, match="unknown temperature unit"):
            TemperatureUnit.from_name(name)


class TestUnitType:
    def test_temperature_unit(self) -> None:
        assert UnitType.METRIC.temperature_unit is TemperatureUnit.CELSIUS
        assert UnitType.IMPERIAL.temperature_unit is TemperatureUnit.FAHRENHEIT
