"""Name shortening against a namespace context."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from .exceptions import ValidationError
from .helpers import is_identifier, is_namespace_identifier

logger = logging.getLogger(__name__)

# Type keywords that never resolve against a namespace
KEYWORDS = frozenset(
    {
        "string",
        "int",
        "float",
        "bool",
        "array",
        "object",
        "callable",
        "iterable",
        "void",
        "self",
        "parent",
        "static",
        "mixed",
        "null",
        "false",
        "true",
        "never",
    }
)


@runtime_checkable
class NameShortener(Protocol):
    """Maps a fully- or partially-qualified name to its short form in a context."""

    def unresolve(self, name: str) -> str: ...


class Namespace:
    """A namespace with its ``use`` aliases.

    Only the name-shortening side of a namespace is modelled here; it is
    what the renderers query to print short class names.

    Example:
        ns = Namespace("App\\Model")
        ns.add_use("Psr\\Log\\LoggerInterface")
        ns.unresolve("\\Psr\\Log\\LoggerInterface")  # "LoggerInterface"
        ns.unresolve("App\\Model\\User")            # "User"
    """

    def __init__(self, name: str = ""):
        if name and not is_namespace_identifier(name):
            raise ValidationError(f"Value '{name}' is not valid name.")
        self.name = name
        self._uses: dict[str, str] = {}

    def add_use(self, name: str, alias: str | None = None) -> Namespace:
        """Register a ``use`` import.

        Args:
            name: Imported name, optionally with a leading separator
            alias: Alias, defaults to the last segment of name

        Returns:
            Self for chaining
        """
        name = name.lstrip("\\")
        if not is_namespace_identifier(name):
            raise ValidationError(f"Value '{name}' is not valid class name.")
        if alias is None:
            alias = name.rsplit("\\", 1)[-1]
        elif not is_identifier(alias):
            raise ValidationError(f"Value '{alias}' is not valid alias.")

        existing = self._uses.get(alias)
        if existing is not None and existing.lower() != name.lower():
            raise ValidationError(f"Alias '{alias}' used already for '{existing}', cannot use for '{name}'.")
        self._uses[alias] = name
        logger.debug(f"Namespace '{self.name}': use {name} as {alias}")
        return self

    def get_uses(self) -> dict[str, str]:
        return dict(self._uses)

    def unresolve(self, name: str) -> str:
        """Return the shortest form of name valid inside this namespace."""
        if not name or name.lower() in KEYWORDS:
            return name
        name = name.lstrip("\\")
        lower = name.lower()

        best: str | None = None
        for alias, original in self._uses.items():
            if (lower + "\\").startswith(original.lower() + "\\"):
                short = alias + name[len(original) :]
                if best is None or len(best) > len(short):
                    best = short

        if best is None and self.name and lower.startswith(self.name.lower() + "\\"):
            return name[len(self.name) + 1 :]
        if best is not None:
            return best
        return ("\\" if self.name else "") + name
