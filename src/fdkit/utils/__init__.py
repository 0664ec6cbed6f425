"""Utility functions for common operations."""

from .ir_io import load_relation_text, load_ir_from_json, save_ir_to_json

__all__ = [
    "load_relation_text",
    "load_ir_from_json",
    "save_ir_to_json",
]
