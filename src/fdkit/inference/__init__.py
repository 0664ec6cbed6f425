"""Functional dependency inference from tabular data."""

from .data2fd import DataSet, infer_relation

__all__ = ["DataSet", "infer_relation"]
