"""Interchange models."""

from .relation import FDSpec, RelationIR, KeyReport, KeyStrategy

__all__ = ["FDSpec", "RelationIR", "KeyReport", "KeyStrategy"]
