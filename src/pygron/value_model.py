"""Classification of decoded JSON values."""

import json
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """The six kinds a decoded JSON value can take."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    LIST = "list"
    MAPPING = "mapping"


def detect_value_kind(value: Any) -> ValueKind:
    """
    Detect the kind of a single decoded JSON value.

    Args:
        value: Value produced by a JSON decoder

    Returns:
        ValueKind of the value

    Raises:
        TypeError: If the value is not something a JSON decoder produces
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.LIST
    if isinstance(value, dict):
        return ValueKind.MAPPING
    raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")


class JSONNumber(float):
    """
    A decoded JSON number that keeps the literal it was read from.

    It behaves as a float in comparisons and arithmetic, while ``text``
    preserves the exact source form (``1E5`` stays ``1E5``). Literals too
    large for a float, such as ``1e400``, keep their text and compare as
    infinity.
    """

    def __new__(cls, text: str) -> "JSONNumber":
        number = super().__new__(cls, text)
        number.text = text
        return number


def number_literal(value: Any) -> str:
    """
    Render a number as JSON text.

    Raises:
        ValueError: If the value is a float that is not finite and carries
            no source literal
    """
    text = getattr(value, "text", None)
    if text is not None:
        return text
    return json.dumps(value, allow_nan=False)


def reject_constant(name: str) -> Any:
    """Reject the non-standard NaN/Infinity constants accepted by Python's decoder."""
    raise ValueError(f"Invalid JSON constant: {name}")


def describe(value: Any) -> str:
    """Short human description of a value, used in error messages."""
    kind = detect_value_kind(value)
    if kind == ValueKind.MAPPING:
        return f"mapping with {len(value)} keys"
    if kind == ValueKind.LIST:
        return f"list with {len(value)} items"
    return kind.value
