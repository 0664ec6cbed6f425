"""Text parsing for relations and functional dependencies."""

from .parser import ARROW_PATTERN, split_attrs, fd_from_string, relation_from_string

__all__ = ["ARROW_PATTERN", "split_attrs", "fd_from_string", "relation_from_string"]
