"""Attribute sets used on both sides of a functional dependency."""

from typing import Dict, Iterable, Iterator, List, Optional

Attr = str


class AttrSet:
    """
    An unordered collection of unique attributes.

    Members are kept in insertion order for iteration, but equality is set
    equality and the textual form is always sorted, so identical sets render
    identically no matter how they were built.
    """

    __slots__ = ("_members",)

    def __init__(self, attrs: Optional[Iterable[Attr]] = None):
        self._members: Dict[Attr, None] = {}
        if attrs is not None:
            for a in attrs:
                self._members.setdefault(a, None)

    def add(self, a: Attr) -> bool:
        """Add an attribute if not already present. Returns True if it was added."""
        if a in self._members:
            return False
        self._members[a] = None
        return True

    def add_all(self, *others: Iterable[Attr]) -> None:
        """Add every attribute of the other sets that is not already present."""
        for other in others:
            for a in other:
                self._members.setdefault(a, None)

    def remove(self, a: Attr) -> bool:
        """Remove an attribute if present. Returns True if it was removed."""
        if a not in self._members:
            return False
        del self._members[a]
        return True

    def contains(self, other: Iterable[Attr]) -> bool:
        """Return True if every attribute of other is a member of this set."""
        return all(a in self._members for a in other)

    def union(self, *others: Iterable[Attr]) -> "AttrSet":
        res = self.copy()
        res.add_all(*others)
        return res

    def intersection(self, *others: Iterable[Attr]) -> "AttrSet":
        """Members of this set that are also present in every other set."""
        keep = [set(other) for other in others]
        return AttrSet(a for a in self._members if all(a in k for k in keep))

    def difference(self, *others: Iterable[Attr]) -> "AttrSet":
        """Remove the attributes of the other sets and return what is left."""
        remaining = dict(self._members)
        for other in others:
            for a in other:
                remaining.pop(a, None)
                if not remaining:
                    return AttrSet()
        return AttrSet(remaining)

    def copy(self) -> "AttrSet":
        return AttrSet(self._members)

    def sorted(self) -> List[Attr]:
        return sorted(self._members)

    def to_string(self, sep: str = ",") -> str:
        """Sorted members joined by sep (an empty sep suits single-letter attributes)."""
        return sep.join(self.sorted())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"AttrSet({self.sorted()!r})"

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Attr]:
        return iter(list(self._members))

    def __contains__(self, a: object) -> bool:
        return a in self._members

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttrSet):
            return self._members.keys() == other._members.keys()
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
