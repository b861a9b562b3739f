"""
In-place edits on a table. Neither operation raises: unknown rows or
headers are ignored.
"""

from __future__ import annotations

from .cells import CellValue, Table


def add_header(table: Table, name: str) -> Table:
    """Append `name` with an empty value to every row that lacks it."""
    for row in table:
        row.setdefault(name, "")
    return table


def update_cell(table: Table, row_index: int, header: str, value: CellValue) -> Table:
    if 0 <= row_index < len(table):
        row = table[row_index]
        if header in row:
            row[header] = value
    return table
