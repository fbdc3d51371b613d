#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#
"""
Locale helpers: find the locale of the running process and the temperature unit people there expect.
"""

import locale
import os

from typing import Optional
from .model.units import TemperatureUnit, UnitType

# regions still reporting temperatures in Fahrenheit
IMPERIAL_REGIONS = frozenset({"US", "LR", "MM"})

# POSIX precedence of the locale environment variables
LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def locale_region(locale_name: Optional[str]) -> Optional[str]:
    """
    Extracts the region code out of a locale name.

    Handles the POSIX form ``language_REGION.encoding@modifier`` as well as the BCP 47
    form ``language-REGION``. The special locales "C" and "POSIX" have no region.

    :param locale_name: The locale name, e.g. "en_US.UTF-8", "en-US" or "my_MM".
    :type locale_name: str | None
    :return: The upper-cased region code, or None when the locale names no region.
    :rtype: str | None
    """
    if not locale_name:
        return None
    name = locale_name.split(".", 1)[0].split("@", 1)[0].replace("-", "_")
    parts = name.split("_")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1].upper()


def unit_type_for_locale(locale_name: Optional[str]) -> UnitType:
    return UnitType.IMPERIAL if locale_region(locale_name) in IMPERIAL_REGIONS else UnitType.METRIC


def default_unit_for_locale(locale_name: Optional[str]) -> TemperatureUnit:
    """
    The temperature unit expected in a locale: Fahrenheit in the United States, Liberia and Myanmar,
    Celsius everywhere else (including when no locale is known).

    :param locale_name: The locale name.
    :type locale_name: str | None
    :return: The default target unit for the locale.
    :rtype: TemperatureUnit
    """
    return unit_type_for_locale(locale_name).temperature_unit


def detect_locale() -> Optional[str]:
    """
    Detects the locale of the process: the first non-empty of LC_ALL, LC_MESSAGES and LANG,
    falling back to the locale reported by the ``locale`` module.

    :return: The locale name, or None when none can be found.
    :rtype: str | None
    """
    for var in LOCALE_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return value
    try:
        return locale.getlocale()[0]
    except ValueError:
        return None
