"""Dump Python values as PHP source literals.

The same routine formats constant values, property defaults and parameter
defaults, so a value always renders identically wherever it appears.

Supported values:
- None, bool, int, float
- str (single-quoted, or double-quoted when it holds control characters)
- list/tuple (sequence literal) and dict (keyed literal), recursively
- Literal (raw code emitted verbatim)
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

from .config import DEFAULT_CONFIG, PrinterConfig
from .exceptions import ValidationError

MAX_DEPTH = 50
INDENT_LENGTH = 4

RE_NEEDS_DOUBLE_QUOTES = re.compile(r"[^\x09\x20-\x7e\xa0-\U0010ffff]")
RE_SINGLE_QUOTE_ESCAPE = re.compile(r"'|\\(?=['\\]|\Z)")

DOUBLE_QUOTE_ESCAPES = {
    "\\": "\\\\",
    "\r": "\\r",
    "\n": "\\n",
    "\t": "\\t",
    "$": "\\$",
    '"': '\\"',
}


@dataclass(frozen=True)
class Literal:
    """Raw PHP code that the dumper emits without quoting.

    Example:
        cls.add_constant("CREATED", Literal("new \\DateTime()"))
        # const CREATED = new \\DateTime();
    """

    value: str

    def __str__(self) -> str:
        return self.value


def _dump_float(value: float) -> str:
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        if "." not in mantissa:
            mantissa += ".0"
        sign = "-" if exponent.startswith("-") else "+"
        return f"{mantissa}E{sign}{exponent.lstrip('+-').lstrip('0') or '0'}"
    return text if "." in text else text + ".0"


def _escape_double_quoted(char: str) -> str:
    if char in DOUBLE_QUOTE_ESCAPES:
        return DOUBLE_QUOTE_ESCAPES[char]
    code = ord(char)
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if 0x80 <= code < 0xA0:
        return f"\\u{{{code:x}}}"
    return char


def _dump_string(value: str) -> str:
    if RE_NEEDS_DOUBLE_QUOTES.search(value):
        return '"' + "".join(_escape_double_quoted(char) for char in value) + '"'
    return "'" + RE_SINGLE_QUOTE_ESCAPE.sub(lambda m: "\\" + m.group(0), value) + "'"


def _dump_array(
    items: list[tuple[Any, Any]],
    level: int,
    config: PrinterConfig,
    seen: set[int],
) -> str:
    if not items:
        return "[]"

    space = config.indentation * level
    parts: list[str] = []
    counter = 0
    for key, item in items:
        rendered = _dump(item, level + 1, config, seen)
        if key == counter and isinstance(key, int) and not isinstance(key, bool):
            parts.append(rendered)
        else:
            parts.append(f"{_dump(key, level + 1, config, seen)} => {rendered}")
        if isinstance(key, int) and not isinstance(key, bool):
            counter = max(key + 1, counter)

    line = ", ".join(parts)
    if "\n" in line or len(line) >= config.wrap_length - level * INDENT_LENGTH:
        wrapped = "".join(f"{config.indentation}{part},\n{space}" for part in parts)
        return f"[\n{space}{wrapped}]"
    return f"[{line}]"


def _dump(value: Any, level: int, config: PrinterConfig, seen: set[int]) -> str:
    if isinstance(value, Literal):
        return str(value)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _dump_float(value)
    if isinstance(value, str):
        return _dump_string(value)
    if isinstance(value, (list, tuple, dict)):
        if level > MAX_DEPTH or id(value) in seen:
            raise ValidationError("Nesting level too deep or recursive dependency.")
        items = list(value.items()) if isinstance(value, dict) else list(enumerate(value))
        seen.add(id(value))
        try:
            return _dump_array(items, level, config, seen)
        finally:
            seen.discard(id(value))
    raise ValidationError(f"Cannot dump value of type {type(value).__name__}.")


def dump(value: Any, config: PrinterConfig | None = None) -> str:
    """Render a Python value as a PHP literal.

    Args:
        value: Value to render
        config: Printer settings (indentation and wrap length for arrays)

    Returns:
        PHP source for the value

    Raises:
        ValidationError: If the value is recursive, too deep or of an
            unsupported type
    """
    return _dump(value, 0, config or DEFAULT_CONFIG, set())


def validate_dumpable(value: Any) -> Any:
    """Return value unchanged if ``dump()`` accepts it.

    Raises:
        ValidationError: If the value is recursive, too deep or of an
            unsupported type
    """
    dump(value)
    return value
