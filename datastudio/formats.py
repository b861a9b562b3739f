"""Maps file extensions and export names to codecs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from . import csv_codec, json_codec, spreadsheet
from .cells import Table
from .errors import UnsupportedFormatError


@dataclass(frozen=True)
class FileFormat:
    name: str
    extension: str
    media_type: str
    encode: Callable[[Table], bytes]
    decode: Callable[[bytes], List[Dict[str, Any]]]

    @property
    def filename(self) -> str:
        return f"data{self.extension}"


JSON = FileFormat("json", ".json", "application/json", json_codec.encode, json_codec.decode)
CSV = FileFormat("csv", ".csv", "text/csv", csv_codec.encode, csv_codec.decode)
EXCEL = FileFormat(
    "excel",
    ".xlsx",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    spreadsheet.encode,
    spreadsheet.decode,
)

_BY_NAME = {"json": JSON, "csv": CSV, "excel": EXCEL, "xlsx": EXCEL}


def for_filename(filename: str) -> FileFormat:
    lowered = filename.lower()
    for fmt in (JSON, CSV, EXCEL):
        if lowered.endswith(fmt.extension):
            return fmt
    raise UnsupportedFormatError(f"Unsupported file type: {filename!r} (expected .json, .csv or .xlsx)")


def for_name(name: str) -> FileFormat:
    try:
        return _BY_NAME[name.lower()]
    except KeyError:
        raise UnsupportedFormatError(f"Unknown export format: {name!r}") from None
