"""Single-cell conversions shared by the codecs and the normalizer."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Union

from openpyxl.cell.cell import Cell
from openpyxl.utils.datetime import to_excel

CellValue = Union[str, int, float, bool, None]
Row = Dict[str, CellValue]
Table = List[Row]


def cell_to_text(value: Any) -> str:
    """Render a cell value the way it appears in CSV and workbook output."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def coerce_cell(cell: Cell | None) -> CellValue:
    """
    Read a workbook cell keeping its type.

    Strings, numbers and booleans come back as-is. Dates are numeric cells in
    the workbook model, so they come back as their Excel serial number.
    Formulas, errors and blanks read as "".
    """
    if cell is None or cell.value is None:
        return ""

    kind = cell.data_type
    value = cell.value
    if kind == "s":
        return str(value)
    if kind == "b":
        return bool(value)
    if kind == "n":
        return value
    if kind == "d":
        return to_excel(value, cell.parent.parent.epoch)
    return ""
