#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#
"""
Command line front end: reads the arguments, converts and prints the result.

    tempconv 100 C F        -> 100°C = 212°F
    tempconv -40 F          -> target unit from the settings or the locale
    tempconv 37.5C          -> same, with the unit attached to the value
"""

import logging

from importlib.metadata import version, PackageNotFoundError
from typing import Optional

import typer

from .config import CONFIG, Settings
from .json.serialization import to_json
from .locales import default_unit_for_locale, detect_locale
from .model.temperature import (
    ABSOLUTE_ZERO, BOILING_POINT, FREEZING_POINT, Temperature, construct, parse, parse_value,
)
from .model.units import TemperatureUnit

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="tempconv",
    help="Convert a temperature between Celsius, Fahrenheit and kelvin.",
    add_completion=False,
)


def get_app_version() -> str:
    try:
        return version("tempconv")
    except PackageNotFoundError:
        return "unknown"


def _version_callback(value: bool):
    if value:
        typer.echo(f"tempconv {get_app_version()}")
        raise typer.Exit()


def resolve_target_unit(to_unit: Optional[str], locale_name: Optional[str] = None) -> TemperatureUnit:
    """
    Picks the unit to convert into: the explicit argument, else the configured target unit,
    else the unit expected in the locale (given, configured or detected, in this order).
    """
    if to_unit:
        return TemperatureUnit.from_name(to_unit)
    configured = CONFIG[Settings.TARGET_UNIT]
    if configured is not None:
        return configured
    locale_name = locale_name or CONFIG[Settings.LOCALE] or detect_locale()
    unit = default_unit_for_locale(locale_name)
    logger.debug("Default target unit for locale %s is %s", locale_name, unit.description)
    return unit


def read_temperature(value: str, from_unit: Optional[str]) -> Temperature:
    if from_unit is None:
        return parse(value)
    return construct(parse_value(value), TemperatureUnit.from_name(from_unit))


def well_known_points() -> list[str]:
    boiling_f = BOILING_POINT.to(TemperatureUnit.FAHRENHEIT)
    freezing_f = FREEZING_POINT.to(TemperatureUnit.FAHRENHEIT)
    freezing_k = FREEZING_POINT.to(TemperatureUnit.KELVIN)
    return [
        f"The boiling point of water at sea level is {BOILING_POINT} or {boiling_f}",
        f"The temperature at which water freezes can be expressed as {FREEZING_POINT}, {freezing_f} or {freezing_k}",
        f"Absolute zero is {ABSOLUTE_ZERO} or {ABSOLUTE_ZERO.to(TemperatureUnit.CELSIUS)}",
    ]


def save_target_unit(name: str) -> None:
    """
    Persists the default target unit in the settings file; "auto" clears it so the locale decides again.
    """
    try:
        unit = None if name.strip().casefold() == "auto" else TemperatureUnit.from_name(name)
        CONFIG[Settings.TARGET_UNIT] = unit
        CONFIG.save_to_file()
    except (ValueError, OSError) as e:
        logger.debug("Cannot save target unit %r: %s", name, e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    logger.info("Default target unit set to %s in %s", unit, CONFIG.settings_file)
    if unit is None:
        typer.echo("Default target unit follows the locale")
    else:
        typer.echo(f"Default target unit set to {unit.description} ({unit.symbol})")


@app.command(context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True})
def convert(
    value: Optional[str] = typer.Argument(None, metavar="VALUE", help="Temperature value, e.g. -40, or value with unit, e.g. 37.5C"),
    from_unit: Optional[str] = typer.Argument(None, metavar="[FROM_UNIT]", help="Unit of the value: C, F, K or the unit name"),
    to_unit: Optional[str] = typer.Argument(None, metavar="[TO_UNIT]", help="Unit to convert to; defaults to the configured unit or the one of your locale"),
    locale_name: Optional[str] = typer.Option(None, "--locale", help="Locale used to pick the default target unit, e.g. en_US"),
    as_json: bool = typer.Option(False, "--json", help="Print the conversion as JSON"),
    points: bool = typer.Option(False, "--points", help="Print the well-known temperature points and exit"),
    set_target_unit: Optional[str] = typer.Option(None, "--set-target-unit", metavar="UNIT", help="Save the default target unit (C, F, K, or auto to follow the locale) and exit"),
    show_version: bool = typer.Option(False, "-V", "--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
):
    """
    Convert a temperature between Celsius, Fahrenheit and kelvin.
    """
    if points:
        for line in well_known_points():
            typer.echo(line)
        return
    if set_target_unit is not None:
        save_target_unit(set_target_unit)
        return
    if value is None:
        raise typer.BadParameter("a temperature value is required", param_hint="'VALUE'")

    try:
        source = read_temperature(value, from_unit)
        target_unit = resolve_target_unit(to_unit, locale_name)
    except ValueError as e:
        logger.debug("Cannot convert %r %r %r: %s", value, from_unit, to_unit, e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    result = source.to(target_unit)
    logger.debug("Converted %s to %s", source, result)
    if as_json:
        typer.echo(to_json({"source": source, "result": result}))
    else:
        typer.echo(f"{source} = {result}")
