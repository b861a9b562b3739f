"""XLSX encode/decode via openpyxl. One sheet, bold header row."""

from __future__ import annotations

import io
import zipfile
from typing import Any, Dict, List

from openpyxl import Workbook, load_workbook
from openpyxl.cell.cell import Cell
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from .cells import Table, cell_to_text, coerce_cell
from .errors import DecodeError
from .rules import COLUMN_WIDTH_PADDING, SHEET_TITLE


def _autosize_columns(worksheet: Worksheet) -> None:
    for column_cells in worksheet.iter_cols():
        longest = max(len(cell_to_text(cell.value)) for cell in column_cells)
        letter = get_column_letter(column_cells[0].column)
        worksheet.column_dimensions[letter].width = longest + COLUMN_WIDTH_PADDING


def _write_text(worksheet: Worksheet, row: int, column: int, text: str) -> Cell:
    cell = worksheet.cell(row=row, column=column)
    cell.value = text
    # openpyxl would store "=..." as a formula
    cell.data_type = "s"
    return cell


def encode(table: Table) -> bytes:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = SHEET_TITLE

    if table:
        headers = list(table[0].keys())
        bold = Font(bold=True)
        for col_idx, header in enumerate(headers, start=1):
            cell = _write_text(worksheet, 1, col_idx, header)
            cell.font = bold

        for row_idx, row in enumerate(table, start=2):
            for col_idx, header in enumerate(headers, start=1):
                _write_text(worksheet, row_idx, col_idx, cell_to_text(row.get(header)))

        _autosize_columns(worksheet)

    out = io.BytesIO()
    workbook.save(out)
    workbook.close()
    return out.getvalue()


def decode(raw: bytes) -> List[Dict[str, Any]]:
    try:
        workbook = load_workbook(io.BytesIO(raw), data_only=False)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError, ValueError) as e:
        raise DecodeError(f"Could not read workbook: {e}") from e

    try:
        worksheet = workbook.worksheets[0]
        # Rows that hold no values are not part of the sheet's data.
        rows = (
            cells
            for cells in worksheet.iter_rows(min_row=worksheet.min_row)
            if any(cell.value is not None for cell in cells)
        )

        header_cells = next(rows, ())
        headers = [cell_to_text(cell.value) for cell in header_cells]
        while headers and header_cells[len(headers) - 1].value is None:
            headers.pop()

        data: List[Dict[str, Any]] = []
        for cells in rows:
            record: Dict[str, Any] = {}
            for i, header in enumerate(headers):
                record[header] = coerce_cell(cells[i] if i < len(cells) else None)
            data.append(record)
    finally:
        workbook.close()

    return data
