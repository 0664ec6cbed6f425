"""Relations with functional dependencies: closures and candidate keys."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from fdkit.config.logging import get_logger
from .attrs import Attr, AttrSet
from .closure import attribute_closure
from .errors import UnknownAttributeInDependency
from .funcdep import FuncDep
from .keys import KeySearch, filter_containing_keys

logger = get_logger(__name__)


@dataclass
class Relation:
    """
    A relation with a set of functional dependencies.

    Attributes:
        name: Name of the relation
        attrs: Every attribute in the relation
        func_deps: Functional dependencies over the relation, owned by it

    Every dependency must only mention attributes of ``attrs``; this is
    checked on construction and whenever a dependency is added.
    """

    name: str = ""
    attrs: AttrSet = field(default_factory=AttrSet)
    func_deps: List[FuncDep] = field(default_factory=list)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise UnknownAttributeInDependency listing every attribute outside attrs."""
        problems = AttrSet()
        for fd in self.func_deps:
            problems.add_all(fd.attributes().difference(self.attrs))
        if len(problems) > 0:
            raise UnknownAttributeInDependency(problems, self.attrs)

    def add_func_dep(self, fd: FuncDep) -> None:
        unknown = fd.attributes().difference(self.attrs)
        if len(unknown) > 0:
            raise UnknownAttributeInDependency(unknown, self.attrs)
        self.func_deps.append(fd)

    def to_string(self, sep: str = ",") -> str:
        lines = [f"{self.name}({self.attrs.to_string(sep)})", ""]
        lines.extend(fd.to_string(sep) for fd in self.func_deps)
        return "\n".join(lines).strip()

    def __str__(self) -> str:
        return self.to_string()

    # Closures

    def closure(self, fd: FuncDep) -> FuncDep:
        """Closure of fd's attributes over this relation's dependencies, keyed by fd.left."""
        return FuncDep(
            fd.left.copy(),
            attribute_closure(fd.left.union(fd.right), self.func_deps),
        )

    def closures(self) -> List[FuncDep]:
        """Closure of every declared dependency, in declaration order."""
        return [self.closure(fd) for fd in self.func_deps]

    def attribute_closure(self, attrs: Iterable[Attr]) -> AttrSet:
        return attribute_closure(attrs, self.func_deps)

    def is_superkey(self, attrs: Iterable[Attr]) -> bool:
        return self.attribute_closure(attrs).contains(self.attrs)

    def implies(self, fd: FuncDep) -> bool:
        """True when fd can be derived from this relation's dependencies."""
        return self.attribute_closure(fd.left).contains(fd.right)

    # Candidate keys

    def candidate_keys(self) -> List[AttrSet]:
        """
        Left sides of declared dependencies whose closure covers every attribute.

        Cheap, but only finds keys that coincide with a declared left side.
        If this returns nothing, try candidate_keys_alt or candidate_keys_bf.
        """
        return _unique(
            cfd.left for cfd in self.closures() if cfd.right.contains(self.attrs)
        )

    def candidate_keys_alt(self) -> List[AttrSet]:
        """
        Closures missing at most two attributes, augmented with the missing ones.

        A shortcut rather than a proof: the augmented sets are not recomputed
        or checked for minimality. Fall back to candidate_keys_bf when this
        returns nothing.
        """
        keys = []
        for cfd in self.closures():
            missing = self.attrs.difference(cfd.right)
            if len(missing) <= 2:
                keys.append(cfd.left.union(missing.sorted()))
        return _unique(keys)

    def candidate_keys_bf(self, max_checks: Optional[int] = None) -> List[AttrSet]:
        """
        Every minimal key of the relation, by exhaustive subset search.

        Args:
            max_checks: Optional bound on closure computations

        Raises:
            SearchBudgetExceeded: If the search needs more than max_checks closures
        """
        search = KeySearch(self.attrs, self.func_deps, max_checks=max_checks)
        keys = filter_containing_keys(search.run())
        logger.debug(f"{self.name}: {len(keys)} candidate keys after {search.checks} closures")
        return keys


def _unique(sets: Iterable[AttrSet]) -> List[AttrSet]:
    seen = set()
    res = []
    for s in sets:
        key = s.to_string()
        if key not in seen:
            seen.add(key)
            res.append(s)
    return res
