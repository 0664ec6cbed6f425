"""Functional dependency model."""

from dataclasses import dataclass, field
from typing import Iterable

from .attrs import AttrSet

ARROW = "-->"


@dataclass
class FuncDep:
    """
    A functional dependency of the form ``left --> right``.

    Values of the left attributes determine the values of the right
    attributes. Operators in ``fdkit.core.axioms`` always build new
    instances and never touch their inputs.
    """

    left: AttrSet = field(default_factory=AttrSet)
    right: AttrSet = field(default_factory=AttrSet)

    @classmethod
    def of(cls, left: Iterable[str], right: Iterable[str]) -> "FuncDep":
        """Build a dependency from plain attribute iterables."""
        return cls(AttrSet(left), AttrSet(right))

    def attributes(self) -> AttrSet:
        """Every attribute mentioned on either side."""
        return self.left.union(self.right)

    def to_string(self, sep: str = ",") -> str:
        return f"{self.left.to_string(sep)} {ARROW} {self.right.to_string(sep)}"

    def __str__(self) -> str:
        return self.to_string()
