"""fdkit: functional dependency analysis for relational schemas."""

from fdkit.core import (
    Attr,
    AttrSet,
    FuncDep,
    Relation,
    Applicable,
    NotApplicable,
    augment,
    compose,
    decompose,
    transitive_with,
    union,
    filter_containing_keys,
    FDKitError,
    MalformedRelationHeader,
    UnknownAttributeInDependency,
    ArrowCountError,
    MalformedDataFile,
    SearchBudgetExceeded,
)
from fdkit.parsing import fd_from_string, relation_from_string
from fdkit.analysis import resolve_candidate_keys

__version__ = "0.1.0"

__all__ = [
    "Attr",
    "AttrSet",
    "FuncDep",
    "Relation",
    "Applicable",
    "NotApplicable",
    "augment",
    "compose",
    "decompose",
    "transitive_with",
    "union",
    "filter_containing_keys",
    "FDKitError",
    "MalformedRelationHeader",
    "UnknownAttributeInDependency",
    "ArrowCountError",
    "MalformedDataFile",
    "SearchBudgetExceeded",
    "fd_from_string",
    "relation_from_string",
    "resolve_candidate_keys",
]
