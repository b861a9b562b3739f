import pytest
from openpyxl import Workbook

from datastudio import formats
from datastudio.cells import cell_to_text, coerce_cell
from datastudio.errors import UnsupportedFormatError


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, ""),
        ("x", "x"),
        (3, "3"),
        (2.5, "2.5"),
        (True, "true"),
        (False, "false"),
        ({"a": 1}, '{"a":1}'),
        ([1, "b"], '[1,"b"]'),
    ],
)
def test_cell_to_text(value, expected):
    assert cell_to_text(value) == expected


def test_coerce_cell_types():
    ws = Workbook().active
    ws["A1"] = "text"
    ws["A2"] = 42
    ws["A3"] = 4.5
    ws["A4"] = True
    ws["A5"] = "=SUM(A2:A3)"

    assert coerce_cell(ws["A1"]) == "text"
    assert coerce_cell(ws["A2"]) == 42
    assert coerce_cell(ws["A3"]) == 4.5
    assert coerce_cell(ws["A4"]) is True
    assert coerce_cell(ws["A5"]) == ""
    assert coerce_cell(ws["B9"]) == ""
    assert coerce_cell(None) == ""


@pytest.mark.parametrize(
    "filename,name",
    [("a.json", "json"), ("B.CSV", "csv"), ("report.xlsx", "excel")],
)
def test_format_for_filename(filename, name):
    assert formats.for_filename(filename).name == name


def test_format_for_filename_rejects_others():
    with pytest.raises(UnsupportedFormatError):
        formats.for_filename("data.xls")


def test_format_for_name():
    assert formats.for_name("xlsx") is formats.EXCEL
    assert formats.for_name("Excel").filename == "data.xlsx"
    with pytest.raises(UnsupportedFormatError):
        formats.for_name("pdf")
