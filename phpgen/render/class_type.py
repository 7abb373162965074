"""Render class, interface and trait definitions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..config import DEFAULT_CONFIG, PrinterConfig
from ..helpers import format_doc_comment, indent, normalize

if TYPE_CHECKING:
    from ..class_type import ClassType
    from ..namespace import NameShortener

logger = logging.getLogger(__name__)


def _shorten_all(names: list[str], shortener: NameShortener | None) -> str:
    if shortener is not None:
        names = [shortener.unresolve(name) for name in names]
    return ", ".join(names)


def _render_traits(cls: ClassType, shortener: NameShortener | None, config: PrinterConfig) -> list[str]:
    """Render one ``use`` clause per trait, braced when it has resolutions."""
    clauses = []
    for trait, resolutions in cls.get_trait_resolutions().items():
        name = shortener.unresolve(trait) if shortener is not None else trait
        if resolutions:
            separator = ";\n" + config.indentation
            clauses.append(f"use {name} {{\n{config.indentation}{separator.join(resolutions)};\n}}")
        else:
            clauses.append(f"use {name};")
    return clauses


def _render_header(cls: ClassType, shortener: NameShortener | None) -> str:
    """Render modifiers, kind, name, extends and implements up to the brace."""
    name = cls.get_name()
    parts = [
        "abstract " if cls.is_abstract() else "",
        "final " if cls.is_final() else "",
        f"{cls.get_type().value} {name} " if name else "",
    ]

    supertypes = cls.supertypes.as_list()
    if supertypes:
        parts.append(f"extends {_shorten_all(supertypes, shortener)} ")

    implements = cls.get_implements()
    if implements:
        parts.append(f"implements {_shorten_all(implements, shortener)} ")

    parts.append("\n{\n" if name else "{\n")
    return "".join(parts)


def render_class(
    cls: ClassType,
    shortener: NameShortener | None = None,
    config: PrinterConfig | None = None,
) -> str:
    """Render a class type as PHP code.

    Layout, top to bottom: doc comment, header, then a body of up to four
    groups (trait uses, constants, properties, methods) in that fixed
    order. Each group is emitted only when non-empty and members keep
    their insertion order. Named types end with a newline; anonymous
    bodies do not, so they can be embedded inline.

    Args:
        cls: Class type to render
        shortener: Name shortener for supertypes, traits and type hints;
            defaults to the namespace the class was created in
        config: Printer settings

    Returns:
        PHP source text
    """
    config = config or DEFAULT_CONFIG
    if shortener is None:
        shortener = cls.get_namespace()

    traits = _render_traits(cls, shortener, config)
    consts = [const.render(shortener, config) for const in cls.get_constants().values()]
    properties = [prop.render(shortener, config) for prop in cls.get_properties().values()]
    methods = [method.render(shortener, config) for method in cls.get_methods().values()]
    logger.debug(
        f"Rendering {cls!r}: {len(traits)} traits, {len(consts)} constants, "
        f"{len(properties)} properties, {len(methods)} methods"
    )

    # (group text, separator placed before the next group)
    groups = [
        ("\n".join(traits), "\n\n"),
        ("\n".join(consts), "\n\n"),
        ("\n\n".join(properties), "\n\n\n"),
        ("\n\n\n".join(methods), "\n"),
    ]
    body = ""
    pending = ""
    for text, separator in groups:
        if text:
            body += pending + text
            pending = separator
    if body:
        body += "\n"

    name = cls.get_name()
    code = normalize(
        format_doc_comment((cls.get_comment() or "") + "\n")
        + _render_header(cls, shortener)
        + indent(body, 1, config)
        + "}"
    )
    return code + "\n" if name else code
