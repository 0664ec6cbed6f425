"""Serializable models for relations, dependencies and key reports."""

from typing import List, Literal, Sequence
from pydantic import BaseModel, Field

from fdkit.core.attrs import AttrSet
from fdkit.core.funcdep import FuncDep
from fdkit.core.relation import Relation


class FDSpec(BaseModel):
    """Functional dependency in interchange form."""

    lhs: List[str]  # determinant attributes
    rhs: List[str]  # dependent attributes

    @classmethod
    def from_func_dep(cls, fd: FuncDep) -> "FDSpec":
        return cls(lhs=fd.left.sorted(), rhs=fd.right.sorted())

    def to_func_dep(self) -> FuncDep:
        return FuncDep.of(self.lhs, self.rhs)


class RelationIR(BaseModel):
    """Relation schema with its functional dependencies."""

    name: str
    attributes: List[str]
    fds: List[FDSpec] = Field(default_factory=list)
    candidate_keys: List[List[str]] = Field(default_factory=list)

    @classmethod
    def from_relation(
        cls, relation: Relation, candidate_keys: Sequence[AttrSet] = ()
    ) -> "RelationIR":
        return cls(
            name=relation.name,
            attributes=relation.attrs.sorted(),
            fds=[FDSpec.from_func_dep(fd) for fd in relation.func_deps],
            candidate_keys=[k.sorted() for k in candidate_keys],
        )

    def to_relation(self) -> Relation:
        """
        Build the core Relation.

        Raises:
            UnknownAttributeInDependency: If an FD mentions undeclared attributes
        """
        return Relation(
            name=self.name,
            attrs=AttrSet(self.attributes),
            func_deps=[fd.to_func_dep() for fd in self.fds],
        )


KeyStrategy = Literal["direct", "augmented", "exhaustive", "none"]


class KeyReport(BaseModel):
    """Outcome of a candidate-key resolution."""

    relation: str
    strategy: KeyStrategy
    keys: List[List[str]] = Field(default_factory=list)
    checks: int = 0  # closure computations spent by the exhaustive search
