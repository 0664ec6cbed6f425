"""Armstrong's axioms as operators over functional dependencies.

Every operator returns either ``Applicable(value)`` or ``NotApplicable(reason)``.
Both are dataclasses with a boolean value, so callers can write::

    res = transitive_with(fd, other)
    if res:
        use(res.value)
"""

from dataclasses import dataclass
from typing import Generic, List, TypeVar, Union

from .attrs import Attr, AttrSet
from .funcdep import FuncDep

T = TypeVar("T")


@dataclass(frozen=True)
class Applicable(Generic[T]):
    """The operator applied and produced value."""

    value: T

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NotApplicable:
    """The operator's precondition does not hold for the given dependencies."""

    reason: str

    def __bool__(self) -> bool:
        return False


AxiomResult = Union[Applicable[T], NotApplicable]


def augment(fd: FuncDep, a: Attr) -> AxiomResult[FuncDep]:
    """
    Augment a dependency with attribute a.

        if A->B and C is an attribute, then AC->BC

    Always applicable.
    """
    left = fd.left.copy()
    right = fd.right.copy()
    left.add(a)
    right.add(a)
    return Applicable(FuncDep(left, right))


def transitive_with(fd: FuncDep, other: FuncDep) -> AxiomResult[FuncDep]:
    """
    Chain two dependencies, dropping the intermediate attributes.

        if A->B and B->C then A->C

    Pseudo-transitivity is included, extra intermediate attributes are ignored:

        if A->BX and B->C then A->C

    Either orientation is accepted (A->B with B->C, or B->C with A->B).
    """
    if fd.right.contains(other.left):
        return Applicable(FuncDep(fd.left.copy(), other.right.copy()))
    if other.right.contains(fd.left):
        return Applicable(FuncDep(other.left.copy(), fd.right.copy()))
    return NotApplicable(
        f"neither {fd} nor {other} has a right side containing the other's left side"
    )


def decompose(fd: FuncDep) -> AxiomResult[List[FuncDep]]:
    """
    Split the right side into one dependency per attribute.

        if A->XYZ then A->X, A->Y, and A->Z

    Not applicable when the right side has a single attribute.
    """
    if len(fd.right) == 1:
        return NotApplicable(f"{fd} has a single attribute on the right side")
    return Applicable([FuncDep(fd.left.copy(), AttrSet([a])) for a in fd.right])


def compose(fd: FuncDep, other: FuncDep) -> AxiomResult[FuncDep]:
    """
    Combine both sides of two dependencies.

        if A->B and X->Y then AX->BY

    Always applicable.
    """
    return Applicable(
        FuncDep(fd.left.union(other.left), fd.right.union(other.right))
    )


def union(fd: FuncDep, other: FuncDep) -> AxiomResult[FuncDep]:
    """
    Merge the right sides of two dependencies sharing a determinant.

        if A->B and A->C then A->BC

    Not applicable when other's left side has an attribute missing from fd's.
    """
    missing = [a for a in other.left if a not in fd.left]
    if missing:
        return NotApplicable(
            f"left side of {fd} lacks {','.join(sorted(missing))} from {other}"
        )
    return Applicable(FuncDep(fd.left.copy(), fd.right.union(other.right)))
