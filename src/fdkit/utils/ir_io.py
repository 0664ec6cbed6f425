"""Utilities for loading and saving relations from/to files."""

from pathlib import Path
from pydantic import TypeAdapter

from fdkit.core.relation import Relation
from fdkit.ir.relation import RelationIR
from fdkit.parsing.parser import relation_from_string


def load_relation_text(path: Path, sep: str = ",") -> Relation:
    """
    Load a relation from its text description.

    Args:
        path: Path to the description file
        sep: Attribute separator

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Relation file not found: {path}")
    return relation_from_string(path.read_text(encoding="utf-8"), sep=sep)


def load_ir_from_json(ir_path: Path) -> RelationIR:
    """
    Load RelationIR from a JSON file.

    Args:
        ir_path: Path to the JSON file

    Returns:
        Loaded RelationIR instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or not a valid RelationIR
    """
    ir_path = Path(ir_path)
    if not ir_path.exists():
        raise FileNotFoundError(f"IR file not found: {ir_path}")

    file_content = ir_path.read_text(encoding="utf-8").strip()
    if not file_content:
        raise ValueError(f"IR file is empty: {ir_path}")

    try:
        return TypeAdapter(RelationIR).validate_json(file_content)
    except Exception as e:
        raise ValueError(f"Failed to load IR from {ir_path}: {e}") from e


def save_ir_to_json(ir: RelationIR, ir_path: Path) -> None:
    """
    Save RelationIR to a JSON file.

    Note:
        Creates parent directories if they don't exist.
    """
    ir_path = Path(ir_path)
    ir_path.parent.mkdir(parents=True, exist_ok=True)
    ir_path.write_text(ir.model_dump_json(indent=2), encoding="utf-8")
