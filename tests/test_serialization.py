"""
Tests for JSON serialization of temperatures.
"""

import json

import pytest

from tempconv.json.serialization import from_json, to_json
from tempconv.model.temperature import InvalidTemperature, Temperature
from tempconv.model.units import TemperatureUnit


class TestToJson:
    def test_temperature(self) -> None:
        text = to_json(Temperature(25.0, TemperatureUnit.CELSIUS))
        assert json.loads(text) == {"__type__": "Temperature", "value": 25.0, "unit": "C"}

    def test_nested_content(self) -> None:
        content = {
            "source": Temperature(100.0, TemperatureUnit.CELSIUS),
            "result": Temperature(212.0, TemperatureUnit.FAHRENHEIT),
            "display": "212°F",
        }
        text = to_json(content)
        assert "212°F" in text
        assert json.loads(text)["result"]["unit"] == "F"

    def test_enum_value(self) -> None:
        assert to_json({"unit": TemperatureUnit.KELVIN}) == '{"unit": "K"}'


class TestFromJson:
    def test_temperature(self) -> None:
        text = '{"__type__": "Temperature", "value": 300, "unit": "K"}'
        assert from_json(text) == Temperature(300.0, TemperatureUnit.KELVIN)

    def test_nested_content(self) -> None:
        source = Temperature(-40.0, TemperatureUnit.FAHRENHEIT)
        decoded = from_json(to_json({"items": [source]}))
        assert decoded == {"items": [source]}

    def test_plain_objects_untouched(self) -> None:
        assert from_json('{"__type__": "Other", "a": 1}') == {"__type__": "Other", "a": 1}
        assert from_json('{"value": 1}') == {"value": 1}

    def test_below_absolute_zero_rejected(self) -> None:
        with pytest.raises(InvalidTemperature):
            from_json('{"__type__": "Temperature", "value": -500, "unit": "F"}')

    @pytest.mark.parametrize("text", [
        '{"__type__": "Temperature", "unit": "C"}',
        '{"__type__": "Temperature", "value": null, "unit": "C"}',
        '{"__type__": "Temperature", "value": "25", "unit": "C"}',
    ])
    def test_non_numeric_value_rejected(self, text) -> None:
        with pytest.raises(ValueError, match="not a number"):
            from_json(text)
