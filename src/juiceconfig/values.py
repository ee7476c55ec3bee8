"""
JSON value tagging.

Parsed JSON arrives as plain Python objects. json_type_of() classifies them
explicitly so that accessors never rely on isinstance checks that confuse
bool with int or int with float.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class JsonType(StrEnum):
    """The JSON type of a parsed value."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


class ValueKind(StrEnum):
    """Types a config value can be read as. Values double as error labels."""

    STRING = "string"
    INT = "int64"
    BOOL = "bool"


def json_type_of(value: Any) -> JsonType:
    """Classify a value produced by json.loads."""
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return JsonType.BOOLEAN
    if isinstance(value, int):
        return JsonType.INTEGER
    if isinstance(value, float):
        return JsonType.NUMBER
    if isinstance(value, str):
        return JsonType.STRING
    if value is None:
        return JsonType.NULL
    if isinstance(value, list):
        return JsonType.ARRAY
    if isinstance(value, dict):
        return JsonType.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def matches_kind(value: Any, kind: ValueKind) -> bool:
    """Whether a stored value can be returned for the requested kind."""
    kind = ValueKind(kind)
    json_type = json_type_of(value)
    if kind is ValueKind.STRING:
        return json_type is JsonType.STRING
    if kind is ValueKind.INT:
        return json_type is JsonType.INTEGER and INT64_MIN <= value <= INT64_MAX
    return json_type is JsonType.BOOLEAN


__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "JsonType",
    "ValueKind",
    "json_type_of",
    "matches_kind",
]
