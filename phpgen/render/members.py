"""Render constant, property and method fragments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..config import DEFAULT_CONFIG, PrinterConfig
from ..dumper import dump
from ..helpers import format_doc_comment, indent
from ..namespace import KEYWORDS

if TYPE_CHECKING:
    from ..members import Constant, Method, Property
    from ..namespace import NameShortener


def shorten(name: str, shortener: NameShortener | None) -> str:
    """Pass a type name through the shortener unless it is a keyword."""
    if shortener is None or name.lower() in KEYWORDS:
        return name
    return shortener.unresolve(name)


def render_constant(const: Constant, config: PrinterConfig | None = None) -> str:
    """Render ``[<visibility> ]const NAME = <value>;`` with its doc comment."""
    visibility = f"{const.visibility} " if const.visibility else ""
    return (
        format_doc_comment(const.comment or "")
        + f"{visibility}const {const.name} = {dump(const.value, config)};"
    )


def render_property(prop: Property, config: PrinterConfig | None = None) -> str:
    """Render a property declaration with its doc comment.

    Visibility defaults to ``public``. The default-value segment is left
    out only when the value is ``None``.
    """
    static = " static" if prop.static else ""
    value = "" if prop.value is None else f" = {dump(prop.value, config)}"
    return (
        format_doc_comment(prop.comment or "")
        + f"{prop.visibility or 'public'}{static} ${prop.name}{value};"
    )


def render_parameters(
    method: Method,
    shortener: NameShortener | None = None,
    config: PrinterConfig | None = None,
) -> str:
    """Render the parenthesised parameter list of a method.

    Lists longer than the configured wrap length render one parameter
    per line.
    """
    config = config or DEFAULT_CONFIG
    params = method.get_parameters()
    parts: list[str] = []

    for index, param in enumerate(params):
        variadic = method.variadic and index == len(params) - 1
        hint = ""
        if param.type_hint:
            null_default = param.has_default_value and param.default_value is None
            nullable = "?" if param.nullable and not null_default else ""
            hint = f"{nullable}{shorten(param.type_hint, shortener)} "
        default = ""
        if param.has_default_value and not variadic:
            default = f" = {dump(param.default_value, config)}"
        parts.append(
            f"{hint}{'&' if param.reference else ''}{'...' if variadic else ''}${param.name}{default}"
        )

    line = ", ".join(parts)
    if len(line) > config.wrap_length:
        separator = ",\n" + config.indentation
        return f"(\n{config.indentation}{separator.join(parts)}\n)"
    return f"({line})"


def render_method(
    method: Method,
    shortener: NameShortener | None = None,
    config: PrinterConfig | None = None,
) -> str:
    """Render a full method: doc comment, signature and body.

    Abstract and bodiless methods end with ``;`` after the signature.
    """
    modifiers = "".join(
        [
            "abstract " if method.abstract else "",
            "final " if method.final else "",
            f"{method.visibility} " if method.visibility else "",
            "static " if method.static else "",
        ]
    )
    params = render_parameters(method, shortener, config)
    return_type = ""
    if method.return_type:
        nullable = "?" if method.return_nullable else ""
        return_type = f": {nullable}{shorten(method.return_type, shortener)}"

    signature = (
        format_doc_comment((method.comment or "") + "\n")
        + f"{modifiers}function {'&' if method.return_reference else ''}{method.name}{params}{return_type}"
    )
    if not method.has_body():
        return signature + ";"

    # Opening brace stays on the signature line when parameters wrapped
    brace_prefix = " " if "\n" in params else "\n"
    body = indent((method.body.rstrip() + "\n").lstrip(), 1, config)
    return f"{signature}{brace_prefix}{{\n{body}}}"
