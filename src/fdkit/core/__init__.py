"""Functional dependency core: attribute sets, the axiom algebra, closures and keys."""

from .attrs import Attr, AttrSet
from .funcdep import FuncDep
from .axioms import (
    Applicable,
    NotApplicable,
    augment,
    compose,
    decompose,
    transitive_with,
    union,
)
from .closure import attribute_closure
from .keys import KeySearch, filter_containing_keys
from .relation import Relation
from .errors import (
    FDKitError,
    MalformedRelationHeader,
    UnknownAttributeInDependency,
    ArrowCountError,
    MalformedDataFile,
    SearchBudgetExceeded,
)

__all__ = [
    "Attr",
    "AttrSet",
    "FuncDep",
    "Applicable",
    "NotApplicable",
    "augment",
    "compose",
    "decompose",
    "transitive_with",
    "union",
    "attribute_closure",
    "KeySearch",
    "filter_containing_keys",
    "Relation",
    "FDKitError",
    "MalformedRelationHeader",
    "UnknownAttributeInDependency",
    "ArrowCountError",
    "MalformedDataFile",
    "SearchBudgetExceeded",
]
