"""Indented JSON serialisation for merged values."""

from typing import Any, Iterator, Optional

from .models.path_token import quote_string
from .models.statement import render_scalar
from .types import EncodingFailure
from .value_model import ValueKind, detect_value_kind


def _plain(text: str) -> str:
    return text


class JSONStyle:
    """
    Decoration applied to each kind of JSON token.

    The base class leaves every token untouched; subclasses override the
    hooks to add terminal colour.
    """
    string = staticmethod(_plain)
    brace = staticmethod(_plain)
    key = staticmethod(_plain)
    number = staticmethod(_plain)
    constant = staticmethod(_plain)

    def scalar(self, value: Any) -> str:
        kind = detect_value_kind(value)
        text = render_scalar(value)
        if kind == ValueKind.STRING:
            return self.string(text)
        if kind == ValueKind.NUMBER:
            return self.number(text)
        return self.constant(text)


PLAIN = JSONStyle()


def encode_json(value: Any, indent: int = 2, style: Optional[JSONStyle] = None) -> str:
    """
    Serialise a value as indented JSON.

    The layout matches ``json.dumps(value, indent=indent, ensure_ascii=False)``.
    Numbers keep their source literal and unpaired surrogates are escaped.

    Args:
        value: Merged value
        indent: Indentation width
        style: Token decoration, plain text by default

    Returns:
        JSON text

    Raises:
        EncodingFailure: If the value cannot be represented as JSON
    """
    try:
        return "".join(_encode_node(value, indent, 0, style or PLAIN))
    except (TypeError, ValueError, RecursionError) as e:
        raise EncodingFailure(f"failed to convert statements to JSON: {e}")


def _encode_node(value: Any, indent: int, level: int, style: JSONStyle) -> Iterator[str]:
    kind = detect_value_kind(value)
    inner = " " * (indent * (level + 1))
    outer = " " * (indent * level)

    if kind == ValueKind.MAPPING:
        if not value:
            yield style.brace("{}")
            return
        yield style.brace("{") + "\n"
        for position, (key, child) in enumerate(value.items()):
            yield inner + style.key(quote_string(key)) + ": "
            yield from _encode_node(child, indent, level + 1, style)
            yield (",\n" if position < len(value) - 1 else "\n")
        yield outer + style.brace("}")
    elif kind == ValueKind.LIST:
        if not value:
            yield style.brace("[]")
            return
        yield style.brace("[") + "\n"
        for position, child in enumerate(value):
            yield inner
            yield from _encode_node(child, indent, level + 1, style)
            yield (",\n" if position < len(value) - 1 else "\n")
        yield outer + style.brace("]")
    else:
        yield style.scalar(value)
