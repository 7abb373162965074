"""Identifier validation and text formatting helpers."""

from __future__ import annotations

import re

from .config import DEFAULT_CONFIG, PrinterConfig

# PHP identifier: letter, underscore or high byte first, then word chars
PHP_IDENT = r"[a-zA-Z_\x7f-\U0010ffff][a-zA-Z0-9_\x7f-\U0010ffff]*"

RE_IDENTIFIER = re.compile(rf"^{PHP_IDENT}\Z")
RE_NAMESPACE_IDENTIFIER = re.compile(rf"^\\?{PHP_IDENT}(?:\\{PHP_IDENT})*\Z")
RE_TRAILING_WHITESPACE = re.compile(r"[\t ]+$", re.MULTILINE)
RE_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def is_identifier(value: object) -> bool:
    """Check that value is a bare identifier without namespace separators."""
    return isinstance(value, str) and bool(RE_IDENTIFIER.match(value))


def is_namespace_identifier(value: object, allow_leading_slash: bool = False) -> bool:
    """Check that value is a namespace-qualified identifier.

    Args:
        value: Candidate name, e.g. ``Foo\\Bar``
        allow_leading_slash: Accept the fully-qualified ``\\Foo\\Bar`` form

    Returns:
        True when every segment is a valid identifier
    """
    if not isinstance(value, str):
        return False
    if value.startswith("\\") and not allow_leading_slash:
        return False
    return bool(RE_NAMESPACE_IDENTIFIER.match(value))


def format_doc_comment(content: str) -> str:
    """Wrap text in a ``/** ... */`` block followed by a newline.

    Single-line content renders inline; anything containing a newline
    renders as a starred block. Blank content renders as nothing.
    """
    stripped = content.strip()
    if not stripped:
        return ""
    if "\n" not in content:
        return f"/** {stripped} */\n"
    return ("/**\n" + stripped).replace("\n", "\n * ") + "\n */\n"


def indent(text: str, level: int = 1, config: PrinterConfig | None = None) -> str:
    """Indent every non-empty line of text by the given number of levels."""
    if level <= 0 or not text:
        return text
    prefix = (config or DEFAULT_CONFIG).indentation * level
    return "".join(prefix + line if line.strip("\r\n") else line for line in text.splitlines(keepends=True))


def normalize(text: str) -> str:
    """Normalize line endings and strip trailing whitespace.

    Converts CRLF/CR to LF, removes control characters other than tab and
    newline, strips trailing spaces on every line, then trims leading and
    trailing blank lines.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = RE_CONTROL_CHARS.sub("", text)
    text = RE_TRAILING_WHITESPACE.sub("", text)
    return text.strip("\n")
