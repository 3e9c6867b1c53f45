"""Terminal colour decoration for statements and JSON output."""

from typing import Any, List

import click

from .encoder import JSONStyle, encode_json
from .models import IndexToken, KeyToken, RootToken, Statement, StatementKind, is_bare_identifier
from .models.path_token import quote_string


def style_string(text: str) -> str:
    return click.style(text, fg="yellow")


def style_brace(text: str) -> str:
    return click.style(text, fg="magenta")


def style_bare(text: str) -> str:
    return click.style(text, fg="blue", bold=True)


def style_number(text: str) -> str:
    return click.style(text, fg="red")


def style_constant(text: str) -> str:
    return click.style(text, fg="cyan")


def colorize_scalar(value: Any) -> str:
    """Colour a scalar literal according to its kind."""
    return COLOR.scalar(value)


def colorize_statement(statement: Statement) -> str:
    """
    Render a statement with colour.

    Removing the ANSI sequences from the result gives exactly
    ``statement.render()``.
    """
    parts: List[str] = []
    for token in statement.path:
        if isinstance(token, RootToken):
            parts.append(style_bare(token.name))
        elif isinstance(token, KeyToken) and is_bare_identifier(token.name):
            parts.append("." + style_bare(token.name))
        elif isinstance(token, KeyToken):
            parts.append(style_brace("[") + style_string(quote_string(token.name)) + style_brace("]"))
        elif isinstance(token, IndexToken):
            parts.append(style_brace("[") + style_number(str(token.index)) + style_brace("]"))

    if statement.kind == StatementKind.SCALAR:
        value = colorize_scalar(statement.value)
    else:
        value = style_brace(statement.kind.value)

    return f"{''.join(parts)} = {value};"


class ColorStyle(JSONStyle):
    """JSON token decoration using the statement colour scheme."""
    string = staticmethod(style_string)
    brace = staticmethod(style_brace)
    key = staticmethod(style_bare)
    number = staticmethod(style_number)
    constant = staticmethod(style_constant)


COLOR = ColorStyle()


def colorize_json(value: Any, indent: int = 2) -> str:
    """
    Serialise a value as indented JSON with colour.

    Removing the ANSI sequences from the result gives exactly
    ``encode_json(value, indent)``.
    """
    return encode_json(value, indent, COLOR)
