"""Tests for functional dependency inference from tabular data."""

import pandas as pd
import pytest
from fdkit.core.attrs import AttrSet
from fdkit.core.errors import MalformedDataFile
from fdkit.core.funcdep import FuncDep
from fdkit.inference.data2fd import DataSet, infer_relation


def cities_frame():
    return pd.DataFrame({
        "zip": ["10001", "10002", "94105", "94107"],
        "city": ["NYC", "NYC", "SF", "SF"],
        "state": ["NY", "NY", "CA", "CA"],
    })


def test_check_column_pair():
    """Test both directions of a column pair are examined."""
    ds = DataSet("places", cities_frame())
    assert ds.check_column_pair("zip", "city") == [FuncDep.of(["zip"], ["city"])]
    assert ds.check_column_pair("city", "state") == [
        FuncDep.of(["state"], ["city"]),
        FuncDep.of(["city"], ["state"]),
    ]


def test_analyze_merges_right_sides():
    """Test dependencies sharing a left attribute are merged."""
    rel = DataSet("places", cities_frame()).analyze()
    assert rel.name == "places"
    by_left = {str(fd.left): fd.right for fd in rel.func_deps}
    assert by_left["zip"] == AttrSet(["city", "state"])
    assert by_left["city"] == AttrSet(["state"])
    assert by_left["state"] == AttrSet(["city"])
    assert rel.candidate_keys() == [AttrSet(["zip"])]


def test_excluded_columns():
    """Test excluded attributes are left out of the relation."""
    rel = DataSet("places", cities_frame(), exclude=["state"]).analyze()
    assert rel.attrs == AttrSet(["zip", "city"])
    assert all("state" not in fd.attributes() for fd in rel.func_deps)


def test_read_csv(tmp_path):
    """Test reading a CSV file keeps values as text."""
    path = tmp_path / "people.csv"
    path.write_text("id,name,team\n1,ann,red\n2,bob,red\n01,cy,blue\n", encoding="utf-8")
    ds = DataSet.read(path)
    assert ds.relation.name == "people"
    assert ds.columns == ["id", "name", "team"]
    assert list(ds.df["id"]) == ["1", "2", "01"]


def test_read_tab_delimited_skips_blank_header(tmp_path):
    """Test tab-delimited files and unnamed columns."""
    path = tmp_path / "people.tsv"
    path.write_text("id\t\tteam\n1\tx\tred\n2\ty\tred\n", encoding="utf-8")
    ds = DataSet.read(path)
    assert ds.columns == ["id", "team"]


def test_infer_relation(tmp_path):
    """Test reading and analyzing in one step."""
    path = tmp_path / "people.csv"
    path.write_text("id,name,team\n1,ann,red\n2,bob,red\n3,ann,blue\n", encoding="utf-8")
    rel = infer_relation(path, exclude=["name"])
    assert rel.attrs == AttrSet(["id", "team"])
    assert rel.func_deps == [FuncDep.of(["id"], ["team"])]


def test_read_rejects_rows_wider_than_header(tmp_path):
    """Test extra fields raise instead of shifting values into other columns."""
    path = tmp_path / "t.csv"
    path.write_text("id,city\n1,NYC,junk\n2,SF,junk\n", encoding="utf-8")
    with pytest.raises(MalformedDataFile) as exc_info:
        DataSet.read(path)
    assert exc_info.value.filename == str(path)


def test_read_rejects_short_rows(tmp_path):
    """Test missing fields raise with the offending record."""
    path = tmp_path / "t.csv"
    path.write_text("id,city\n1,NYC\n2\n", encoding="utf-8")
    with pytest.raises(MalformedDataFile, match="wrong number of fields in record 3"):
        DataSet.read(path)


def test_read_keeps_empty_values(tmp_path):
    """Test empty fields are values, not missing fields."""
    path = tmp_path / "t.csv"
    path.write_text("id,city\n1,\n2,SF\n", encoding="utf-8")
    ds = DataSet.read(path)
    assert list(ds.df["city"]) == ["", "SF"]


def test_read_empty_file(tmp_path):
    """Test an empty file raises MalformedDataFile."""
    path = tmp_path / "t.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(MalformedDataFile):
        DataSet.read(path)


def test_read_duplicate_header(tmp_path):
    """Test repeated column names are rejected."""
    path = tmp_path / "t.csv"
    path.write_text("id,id\n1,2\n", encoding="utf-8")
    with pytest.raises(MalformedDataFile, match="duplicate column names"):
        DataSet.read(path)
