import json

import pytest
import requests

from statdash import loader
from statdash.dataset import CellKind
from statdash.errors import LoadError
from statdash.loader import load, load_sample, load_source, parse_csv, parse_json
from statdash.utils import sniff_delimiter


CSV_TEXT = (
    "Name, Age, City, Score\n"
    "John, 25, New York, 88.5\n"
    "Jane, 30, Los Angeles, \n"
    "Bob, n/a, Chicago, 1e2\n"
)


def test_parse_csv_types_cells():
    ds = parse_csv(CSV_TEXT)
    assert ds.columns == ["Name", "Age", "City", "Score"]
    assert len(ds) == 3
    ages = ds.cells("Age")
    assert ages[0].kind is CellKind.NUMBER and ages[0].value == 25
    assert isinstance(ages[0].value, int)
    assert ages[2].kind is CellKind.TEXT and ages[2].value == "n/a"
    scores = ds.cells("Score")
    assert scores[0].value == 88.5
    assert scores[1].kind is CellKind.ABSENT
    assert scores[2].value == 100.0
    assert ds.cells("City")[1].value == "Los Angeles"


def test_parse_csv_requires_header_and_row():
    with pytest.raises(LoadError, match="at least a header and one data row"):
        parse_csv("a,b,c\n")
    with pytest.raises(LoadError):
        parse_csv("")


def test_parse_csv_other_delimiters():
    ds = parse_csv("a;b\n1;2\n3;4\n")
    assert ds.columns == ["a", "b"]
    assert [c.value for c in ds.cells("b")] == [2, 4]
    tabbed = parse_csv("a\tb\n1\tx\n", delimiter="\t")
    assert tabbed.cells("b")[0].value == "x"


def test_parse_csv_skips_rows_with_extra_fields():
    ds = parse_csv("a,b\n1,2\n3,4,5\n6,7\n")
    assert [c.value for c in ds.cells("a")] == [1, 6]


def test_parse_csv_repairs_duplicate_and_blank_headers():
    ds = parse_csv("a,a,,b\n1,2,3,4\n")
    assert ds.columns == ["a", "a__2", "col", "b"]
    assert ds.cells("a__2")[0].value == 2
    assert ds.cells("col")[0].value == 3


def test_non_finite_literals_stay_text():
    ds = parse_csv("a,b\nnan,1\ninf,2\n")
    assert [c.kind for c in ds.cells("a")] == [CellKind.TEXT, CellKind.TEXT]


def test_sniff_delimiter():
    assert sniff_delimiter("a|b|c\n1|2|3\n4|5|6\n") == "|"
    assert sniff_delimiter("value\n1\n2\n") == ","


def test_parse_json_array_and_object():
    ds = parse_json('[{"a": 1, "b": "x"}, {"a": 2.5, "b": null}]')
    assert ds.columns == ["a", "b"]
    assert ds.cells("b")[1].kind is CellKind.ABSENT
    single = parse_json('{"a": 1}')
    assert len(single) == 1


@pytest.mark.parametrize("text", ["[1, 2]", '"hello"', "{not json", "[]"])
def test_parse_json_rejects_bad_payloads(text):
    with pytest.raises(LoadError):
        parse_json(text)


def test_load_files(tmp_path):
    csv_path = tmp_path / "data.csv"
    csv_path.write_text("x,y\n1,2\n3,4\n", encoding="utf-8")
    json_path = tmp_path / "data.json"
    json_path.write_text(json.dumps([{"x": 1}, {"x": 2}]), encoding="utf-8")
    txt_path = tmp_path / "data.txt"
    txt_path.write_text("x,y\n5,6\n", encoding="utf-8")

    assert load(str(csv_path)).source == "data.csv"
    assert len(load(str(json_path))) == 2
    assert load(str(txt_path)).cells("y")[0].value == 6
    assert load(str(json_path), {"type_override": "json"}).columns == ["x"]


def test_load_strips_bom(tmp_path):
    p = tmp_path / "bom.csv"
    p.write_bytes("\ufeffa,b\n1,2\n".encode("utf-8"))
    assert load(str(p), {"encoding": "utf-8"}).columns == ["a", "b"]


def test_load_missing_file(tmp_path):
    with pytest.raises(LoadError, match="File not found"):
        load(str(tmp_path / "nope.csv"))


def test_load_sample():
    ds = load_sample("population")
    assert len(ds) == 5
    assert ds.columns == ["city", "population", "area", "density"]
    with pytest.raises(LoadError):
        load_sample("weather")


class _Response:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP error! status: {self.status_code}")

    def json(self):
        return self._payload


def test_fetch_json(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _Response({"temp": 21.5, "city": "Oslo"})

    monkeypatch.setattr(loader.requests, "get", fake_get)
    ds = load_source("https://example.com/data.json", {"http_timeout": 3})
    assert calls == [("https://example.com/data.json", 3)]
    assert len(ds) == 1
    assert ds.cells("temp")[0].value == 21.5


def test_fetch_json_http_error(monkeypatch):
    monkeypatch.setattr(loader.requests, "get", lambda url, timeout: _Response({}, status=404))
    with pytest.raises(LoadError, match="Failed to fetch data from URL"):
        load_source("http://example.com/missing")


def test_fetch_json_network_error(monkeypatch):
    def boom(url, timeout):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(loader.requests, "get", boom)
    with pytest.raises(LoadError, match="refused"):
        load_source("http://example.com/data")


def test_load_source_dispatch(tmp_path):
    assert load_source("sample:sales").source == "sample:sales"
    p = tmp_path / "d.csv"
    p.write_text("a\n1\n", encoding="utf-8")
    assert load_source(str(p)).columns == ["a"]
    with pytest.raises(LoadError):
        load_source("  ")
