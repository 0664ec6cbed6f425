"""Attribute-set closure under a list of functional dependencies."""

from typing import Iterable, Sequence

from .attrs import Attr, AttrSet
from .funcdep import FuncDep


def attribute_closure(seed: Iterable[Attr], fds: Sequence[FuncDep]) -> AttrSet:
    """
    Compute X+ for the attributes in seed with respect to fds.

    Every dependency whose left side is already covered contributes its
    right side, pass after pass, until a full pass adds nothing. The result
    only grows and is bounded by the attributes mentioned, so it terminates.
    """
    closed = AttrSet(seed)
    last = -1
    while len(closed) != last:
        last = len(closed)
        for other in fds:
            if closed.contains(other.left):
                closed.add_all(other.right)
    return closed
