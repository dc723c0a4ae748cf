import math

import pytest

from statdash.dataset import Cell, CellKind, Dataset
from statdash.schema import (
    column_labels,
    infer_column_types,
    is_numeric_column,
    numeric_columns,
    numeric_projection,
    present_values,
)

from .conftest import make_dataset


@pytest.mark.parametrize(
    "raw,kind,value",
    [
        (3, CellKind.NUMBER, 3),
        (2.5, CellKind.NUMBER, 2.5),
        ("2.5", CellKind.TEXT, "2.5"),
        ("", CellKind.TEXT, ""),
        (None, CellKind.ABSENT, None),
        (float("nan"), CellKind.ABSENT, None),
        (math.inf, CellKind.ABSENT, None),
        (True, CellKind.TEXT, "true"),
        ({"a": 1}, CellKind.TEXT, "{'a': 1}"),
    ],
)
def test_cell_from_raw(raw, kind, value):
    cell = Cell.from_raw(raw)
    assert cell.kind is kind
    assert cell.value == value


def test_int_cells_keep_their_type():
    assert isinstance(Cell.from_raw(1200).value, int)


def test_columns_follow_first_record_order():
    ds = Dataset.from_records([{"b": 1, "a": "x"}, {"a": "y", "b": 2, "c": 3}])
    assert ds.columns == ["b", "a"]
    assert ds.has_column("c")
    assert not ds.has_column("d")


def test_missing_key_reads_as_absent():
    ds = Dataset.from_records([{"a": 1, "b": 2}, {"a": 3}])
    assert [c.kind for c in ds.cells("b")] == [CellKind.NUMBER, CellKind.ABSENT]


def test_to_frame_and_records():
    ds = Dataset.from_records([{"a": 1, "b": None}, {"a": 2, "b": "t", "c": 4}])
    df = ds.to_frame()
    assert list(df.columns) == ["a", "b", "c"]
    assert df.shape == (2, 3)
    assert ds.to_records()[0] == {"a": 1, "b": None}


def test_numeric_columns_ignores_text_only_column():
    ds = make_dataset(score=[1, 2, 3], name=["a", "b", "c"])
    assert numeric_columns(ds) == ["score"]


def test_numeric_looking_strings_are_not_numeric(mixed):
    assert not is_numeric_column(mixed, "code")
    assert numeric_columns(mixed) == ["amount"]


def test_numeric_projection_drops_non_numeric(mixed):
    assert numeric_projection(mixed, "amount") == [10.0, 12.5, 7.0]
    assert present_values(mixed, "amount") == [10, "n/a", 12.5, 7]


def test_projection_never_longer_than_dataset(mixed):
    for col in mixed.columns:
        assert len(numeric_projection(mixed, col)) <= len(mixed)


def test_empty_dataset_has_no_numeric_columns():
    assert numeric_columns(Dataset()) == []


def test_column_types_and_labels(sales):
    types = infer_column_types(sales)
    assert types["numeric_columns"] == ["sales", "profit"]
    assert types["text_columns"] == ["month", "region"]
    assert column_labels(sales)[1] == ("sales", "sales (numeric)")
    assert column_labels(sales)[0] == ("month", "month (text)")
