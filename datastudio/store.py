from __future__ import annotations

import logging
from typing import Optional

from . import edits
from .cells import CellValue, Table

logger = logging.getLogger(__name__)


class TableStore:
    """
    Holds the one shared table document.

    There is no locking; concurrent writers race. Callers replace the table
    wholesale or go through the edit helpers below.
    """

    def __init__(self, table: Optional[Table] = None):
        self._table: Table = table if table is not None else []

    def get(self) -> Table:
        return self._table

    def replace(self, table: Table) -> None:
        logger.debug("Replacing table: %d -> %d rows", len(self._table), len(table))
        self._table = table

    def add_header(self, name: str) -> Table:
        return edits.add_header(self._table, name)

    def update_cell(self, row_index: int, header: str, value: CellValue) -> Table:
        return edits.update_cell(self._table, row_index, header, value)
