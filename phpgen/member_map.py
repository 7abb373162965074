"""Ordered member storage keyed by declared name."""

from __future__ import annotations

from collections.abc import Iterator

from .exceptions import NotFoundError


class MemberMap[T]:
    """Insertion-ordered map of members keyed by name.

    ``upsert`` replaces an entry that already has the key in place, so a
    member redeclared under the same name keeps its original position and
    the last write wins.
    """

    def __init__(self, kind: str):
        """Initialize an empty map.

        Args:
            kind: Member kind used in not-found messages (e.g. "Property")
        """
        self.kind = kind
        self._items: dict[str, T] = {}

    def upsert(self, name: str, member: T) -> T:
        """Insert or replace the member stored under name."""
        self._items[name] = member
        return member

    def get(self, name: str) -> T:
        """Return the member stored under name.

        Raises:
            NotFoundError: If no member has that name
        """
        try:
            return self._items[name]
        except KeyError:
            raise NotFoundError(self.kind, name) from None

    def replace(self, members: dict[str, T]) -> None:
        """Swap the whole content for an already-validated mapping."""
        self._items = dict(members)

    def names(self) -> list[str]:
        return list(self._items)

    def to_dict(self) -> dict[str, T]:
        return dict(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"MemberMap({self.kind}, {self.names()!r})"
