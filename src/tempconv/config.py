#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

import os
import json
import logging
import threading

from typing import Any
from enum import StrEnum, Enum
from pathlib import Path
from .model.times import DEFAULT_TIMEZONE, valid_timezone
from .model.units import TemperatureUnit


def get_config_dir() -> Path:
    """
    Gets the directory holding the settings file and the logs: ``$TEMPCONV_HOME`` when set,
    ``~/.tempconv`` otherwise.

    :return: The configuration directory as a pathlib.Path object.
    :rtype: Path
    """
    home = os.environ.get("TEMPCONV_HOME")
    return Path(home) if home else Path.home() / ".tempconv"

#<editor-fold desc="Constants, Factory Settings">
# Paths
CONFIG_DIR = get_config_dir()
LOG_DIR = f"{CONFIG_DIR}/logs"
SETTINGS_FILE = f"{CONFIG_DIR}/settings.json"
#</editor-fold>

class Settings(StrEnum):
    """
    Enumeration for application settings.

    This class represents different configurable settings for an application as
    enumerable constants. Each setting has an associated default value. It provides
    a structured and type-safe way of defining application configuration options.

    Attributes:
    :ivar default: The default value associated with the setting.
    :type default: Any
    """
    TARGET_UNIT = "target_unit", {"value":None}                    # None - pick from the locale
    LOCALE = "locale", {"value":None}                              # None - detect from the environment
    LOG_LEVEL = "log_level", {"value":"WARNING"}
    LOG_TO_FILE = "log_to_file", {"value":False}
    LOCAL_TIMEZONE = "local_timezone", {"value":DEFAULT_TIMEZONE.zone}

    def __new__(cls, value: str, default: dict = None):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.default = default
        return obj

# Defaults
DEFAULT_SETTINGS: dict[str, Any] = {item.name: item.default for item in Settings}

def _json_default(o) -> dict[str, Any]:
    """
    Encodes an object to a JSON-compatible format. This function is used to provide a default
    serialization behavior for config objects that are not inherently serializable by Python's
    `json` library.

    :param o: An object to serialize. Can include Enum instances or other arbitrary objects
              with attributes or string representations.
    :type o: Any

    :return: A JSON-compatible representation of the object. For Enum instances, it provides
             their values. Other objects fallback to their `__dict__` attribute or
             string representation.
    :rtype: dict
    """
    if isinstance(o, Enum):
        return {"value": o.value}

    if isinstance(o, dict):
        return o

    # Generic object: use its __dict__ as a last resort
    if hasattr(o, "__dict__"):
        return o.__dict__

    # Plain JSON scalars and fallback to string representation
    if o is None or isinstance(o, (bool, int, float, str)):
        return {"value": o}
    return {"value": str(o)}


class AppConfig:
    """
    Handles configuration settings for the application, providing access to settings
    and persisting configurations to a file.

    Values are kept marshaled, in the same shape as in the settings file, and unmarshaled
    to their typed form on access. When no settings file is found, or it cannot be read,
    the factory defaults apply.

    :ivar settings: A dictionary holding the application's configuration values.
    :type settings: dict[str, Any]
    """
    def __init__(self, settings_file: str = None):
        self._lock = threading.RLock()
        self.settings: dict[str, Any] = DEFAULT_SETTINGS.copy()
        self._settings_file = str(settings_file or SETTINGS_FILE)

    @property
    def settings_file(self) -> str:
        return self._settings_file

    def __getitem__(self, arg: Settings) -> Any:
        if arg.name not in self.settings:
            self.settings[arg.name] = arg.default
        return AppConfig.__unmarshal__(arg, self.settings.get(arg.name))

    def __setitem__(self, arg: Settings, value: Any):
        with self._lock:
            self.settings[arg.name] = AppConfig.__marshal__(arg, value)

    def save_to_file(self):
        os.makedirs(os.path.dirname(self._settings_file), exist_ok=True)
        self._write_to_file()

    def read_from_file(self) -> bool:
        """
        Loads the settings file over the factory defaults. Settings missing from the file keep
        their defaults; an unreadable file leaves the defaults in place.

        :return: True when the file was read, False otherwise.
        :rtype: bool
        """
        return self._read_from_file()

    @staticmethod
    def __unmarshal__(arg: Settings, value: dict[str, Any]) -> Any:
        raw = value.get("value", arg.default["value"])
        match arg:
            case Settings.LOCAL_TIMEZONE:
                return valid_timezone(raw)
            case Settings.TARGET_UNIT:
                return TemperatureUnit.from_name(raw) if raw else None
            case Settings.LOG_LEVEL:
                return logging.getLevelNamesMapping().get(str(raw).upper(), logging.WARNING)
            case _:
                if "value" in value:
                    return value["value"]
                else:
                    return value

    @staticmethod
    def __marshal__(arg: Settings, value: Any) -> dict[str, Any]:
        match arg:
            case Settings.LOCAL_TIMEZONE:
                if hasattr(value, "zone"):
                    return {"value": value.zone}
                elif isinstance(value, dict):
                    return value
                else:
                    return {"value": value}
            case Settings.LOG_LEVEL:
                if isinstance(value, int):
                    return {"value": logging.getLevelName(value)}
                return {"value": value}
            case _:
                if isinstance(value, dict) and "value" in value and len(value) == 1:
                    return value
                else:
                    return _json_default(value)

    def _read_from_file(self) -> bool:
        logger = logging.getLogger(__name__)
        with self._lock:
            if not os.path.exists(self._settings_file):
                return False
            try:
                with open(self._settings_file, "r", encoding="utf-8") as f:
                    content = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("Cannot read settings file %s, using defaults: %s", self._settings_file, e)
                return False
            if not isinstance(content, dict):
                logger.warning("Ignoring settings file %s: not a JSON object", self._settings_file)
                return False
            known = {item.name for item in Settings}
            self.settings = DEFAULT_SETTINGS.copy()
            self.settings.update({k: v for k, v in content.items() if k in known and isinstance(v, dict) and "value" in v})
            return True

    def _write_to_file(self) -> None:
        with self._lock:
            tmp_path = self._settings_file + ".tmp"
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self.settings, f, indent=2, default=_json_default)
            os.replace(tmp_path, self._settings_file)

CONFIG = AppConfig()
