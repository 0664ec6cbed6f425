"""Parse text descriptions of relations and functional dependencies."""

import re
from typing import List

from fdkit.core.attrs import Attr, AttrSet
from fdkit.core.errors import ArrowCountError, MalformedRelationHeader
from fdkit.core.funcdep import FuncDep
from fdkit.core.relation import Relation

# Accepts multiple forms of left->right arrows:
#   > --> ---> >> -->>
#   ~~> ~> ==> ===>>
#   → ⇒ ⇾  (Unicode arrows)
ARROW_PATTERN = re.compile(r"[-=~]*[>→⇒⇾]+")


def split_attrs(text: str, sep: str = ",") -> List[Attr]:
    """
    Split an attribute list on sep, trimming whitespace and dropping blanks.

    An empty sep treats every non-space character as one attribute.
    """
    parts = list(text) if sep == "" else text.split(sep)
    return [p.strip() for p in parts if p.strip()]


def fd_from_string(fdesc: str, sep: str = ",") -> FuncDep:
    """
    Parse ``left --> right`` into a FuncDep.

    Any arrow matched by ARROW_PATTERN is accepted, as long as exactly one
    appears in the line.

    Raises:
        ArrowCountError: If the line has no arrow or more than one
    """
    parts = ARROW_PATTERN.split(fdesc)
    if len(parts) != 2:
        raise ArrowCountError(fdesc, len(parts) - 1)
    return FuncDep(AttrSet(split_attrs(parts[0], sep)), AttrSet(split_attrs(parts[1], sep)))


def relation_from_string(desc: str, sep: str = ",") -> Relation:
    """
    Parse a relation and its functional dependencies.

    The first line is ``Name(attr, attr, ...)``; every following non-blank
    line is one dependency.

    Args:
        desc: Relation description
        sep: Attribute separator ("" for single-character attributes)

    Returns:
        Validated Relation

    Raises:
        MalformedRelationHeader: If the first line is not Name(attrs)
        ArrowCountError: If a dependency line has zero or several arrows
        UnknownAttributeInDependency: If dependencies mention undeclared attributes
    """
    lines = desc.strip().splitlines()
    if not lines:
        raise MalformedRelationHeader("", "empty relation description")

    head = lines[0].strip()
    pidx = head.find("(")
    if pidx == -1:
        raise MalformedRelationHeader(head)
    opens, closes = head.count("("), head.count(")")
    if opens != closes:
        raise MalformedRelationHeader(head, "unbalanced parentheses in relation header")
    if opens > 1:
        raise MalformedRelationHeader(head, "nested parentheses not allowed in relation header")
    if not head.endswith(")"):
        raise MalformedRelationHeader(head, "relation header must end with ')'")

    name = head[:pidx].strip()
    attrs = AttrSet(split_attrs(head[pidx + 1 : -1], sep))

    fds = []
    for line in lines[1:]:
        line = line.strip()
        if not line:
            continue
        fds.append(fd_from_string(line, sep))

    return Relation(name=name, attrs=attrs, func_deps=fds)
