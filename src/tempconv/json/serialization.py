#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

import json

from enum import Enum
from typing import Any
from ..model.temperature import Temperature

# classes known to the object hook, by their "__type__" tag
JSON_TYPES = {
    "Temperature": Temperature,
}


#<editor-fold desc="JSON serialization helpers">
def _json_default(o):
    """
    JSON serializer for custom types used in this project.
    """
    # Prefer a user-defined json_encode() when available
    obj_encoder = getattr(o, "json_encode", None)
    if callable(obj_encoder):
        return obj_encoder()

    # Enum -> value
    if isinstance(o, Enum):
        return o.value

    # Generic object: use its __dict__ as a last resort
    if hasattr(o, "__dict__"):
        return o.__dict__

    # Fallback to string representation
    return str(o)

def _json_object_hook(obj: dict) -> Any:
    """
    Decode a JSON object into a specific Python object or retain its dictionary form.
    This function identifies objects based on their ``__type__`` field and hands them to the
    class-specific decoder. If no specific decoding logic applies, the function returns the
    object as it is.

    Decoding a temperature validates it; a temperature below absolute zero raises
    :class:`~tempconv.model.temperature.InvalidTemperature`.

    :param obj: The JSON object or dictionary to decode.
    :type obj: dict
    :return: The decoded Python object or the original input if no specific decoding is applied.
    :rtype: Any
    """
    if not isinstance(obj, dict):
        return obj

    class_name = obj.get("__type__")
    if isinstance(class_name, str):
        cls = JSON_TYPES.get(class_name)
        if cls is not None:
            decoded = cls.json_decode(obj)
            if decoded is not None:
                return decoded

    return obj

#</editor-fold>

def to_json(content: Any, indent: int | None = None) -> str:
    """
    Serializes content holding temperatures (and other plain values) to a JSON string.
    Non-ASCII characters, such as the degree sign of display strings, are kept as they are.
    """
    return json.dumps(content, indent=indent, default=_json_default, ensure_ascii=False)

def from_json(text: str) -> Any:
    """
    Deserializes a JSON string, turning tagged objects back into temperatures.
    """
    return json.loads(text, object_hook=_json_object_hook)
