"""
Row normalization.

Responsibilities:
- canonical header set and order (first row wins)
- string coercion and trimming of every cell
- reshaping the flat edit form into raw rows
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

from .cells import Table, cell_to_text
from .errors import DecodeError


def table_headers(table: Table) -> List[str]:
    if not table:
        return []
    return list(table[0].keys())


def normalize_rows(raw_rows: Sequence[Mapping[str, Any]]) -> Table:
    """
    Force every row onto the first row's headers.

    Rules:
    - Empty input is returned unchanged.
    - Headers come from the first row, in order; later rows' extra keys are dropped.
    - Every cell becomes a trimmed string; absent keys and None become "".
    """
    if not raw_rows:
        return list(raw_rows)

    headers = list(dict.fromkeys(raw_rows[0].keys()))
    normalized: Table = []

    for row in raw_rows:
        clean: Dict[str, Any] = {}
        for header in headers:
            clean[header.strip()] = cell_to_text(row.get(header)).strip()
        normalized.append(clean)

    return normalized


def _form_count(form: Mapping[str, Any], *names: str) -> int:
    for name in names:
        raw = form.get(name)
        if raw is None:
            continue
        try:
            return int(str(raw).strip())
        except ValueError as e:
            raise DecodeError(f"Form field {name!r} is not an integer: {raw!r}") from e
    raise DecodeError(f"Form is missing {' / '.join(repr(n) for n in names)}")


def rows_from_form(form: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """
    Rebuild raw rows from the editable table's flat form fields:
    headerCount (or colCount), rowCount, header_<c>, cell_<r>_<c>.
    """
    col_count = _form_count(form, "headerCount", "colCount")
    row_count = _form_count(form, "rowCount")

    headers = [form.get(f"header_{c}") or "" for c in range(col_count)]

    rows: List[Dict[str, Any]] = []
    for r in range(row_count):
        row: Dict[str, Any] = {}
        for c, header in enumerate(headers):
            row[header] = form.get(f"cell_{r}_{c}")
        rows.append(row)

    return rows
