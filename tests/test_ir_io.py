"""Tests for interchange models and file I/O."""

import pytest
from fdkit.core.attrs import AttrSet
from fdkit.core.errors import UnknownAttributeInDependency
from fdkit.core.funcdep import FuncDep
from fdkit.core.relation import Relation
from fdkit.ir.relation import FDSpec, RelationIR
from fdkit.utils.ir_io import load_ir_from_json, load_relation_text, save_ir_to_json


def sample_relation():
    return Relation(
        "orders",
        AttrSet(["order_id", "customer", "city"]),
        [
            FuncDep.of(["order_id"], ["customer"]),
            FuncDep.of(["customer"], ["city"]),
        ],
    )


def test_relation_ir_from_relation():
    """Test conversion sorts attributes and carries keys."""
    rel = sample_relation()
    ir = RelationIR.from_relation(rel, rel.candidate_keys())
    assert ir.name == "orders"
    assert ir.attributes == ["city", "customer", "order_id"]
    assert ir.fds[0] == FDSpec(lhs=["order_id"], rhs=["customer"])
    assert ir.candidate_keys == [["order_id"]]


def test_relation_ir_to_relation():
    """Test the IR builds an equivalent core relation."""
    rel = RelationIR.from_relation(sample_relation()).to_relation()
    assert rel.name == "orders"
    assert rel.candidate_keys_bf() == [AttrSet(["order_id"])]


def test_relation_ir_unknown_attribute():
    """Test building a relation from an inconsistent IR fails."""
    ir = RelationIR(name="R", attributes=["A"], fds=[FDSpec(lhs=["A"], rhs=["B"])])
    with pytest.raises(UnknownAttributeInDependency):
        ir.to_relation()


def test_save_and_load_json(tmp_path):
    """Test a RelationIR survives a JSON file."""
    ir = RelationIR.from_relation(sample_relation())
    path = tmp_path / "nested" / "orders.json"
    save_ir_to_json(ir, path)
    assert path.exists()
    assert load_ir_from_json(path) == ir


def test_load_json_missing(tmp_path):
    """Test loading a missing file."""
    with pytest.raises(FileNotFoundError):
        load_ir_from_json(tmp_path / "missing.json")


def test_load_json_empty(tmp_path):
    """Test loading an empty file."""
    path = tmp_path / "empty.json"
    path.write_text("  ", encoding="utf-8")
    with pytest.raises(ValueError, match="empty"):
        load_ir_from_json(path)


def test_load_json_invalid(tmp_path):
    """Test loading JSON that is not a RelationIR."""
    path = tmp_path / "bad.json"
    path.write_text('{"name": 3}', encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to load IR"):
        load_ir_from_json(path)


def test_load_relation_text(tmp_path):
    """Test reading a relation description file."""
    path = tmp_path / "r.txt"
    path.write_text("R(A;B)\n\nA -> B\n", encoding="utf-8")
    rel = load_relation_text(path, sep=";")
    assert rel.attrs == AttrSet("AB")
    assert rel.candidate_keys() == [AttrSet("A")]


def test_load_relation_text_missing(tmp_path):
    """Test reading a missing description file."""
    with pytest.raises(FileNotFoundError):
        load_relation_text(tmp_path / "nope.txt")
