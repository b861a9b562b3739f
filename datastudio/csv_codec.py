"""
CSV encode/decode for the shared table.

Encoding doubles embedded quotes and wraps fields that contain a comma or a
quote. Decoding only toggles on quotes and never undoubles them, so a value
holding quotes reads back with every quote character removed. Headers are
split on bare commas.
"""

from __future__ import annotations

from typing import Any, Dict, List

from charset_normalizer import from_bytes

from .cells import Table, cell_to_text
from .rules import CSV_DELIMITER, CSV_LINE_TERMINATOR, CSV_QUOTE, OUTPUT_ENCODING


def decode_text(raw: bytes) -> str:
    """
    Decode CSV bytes to text with LF line endings.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is stripped rather than kept as part of the first header.
    - If the guess fails to decode, retry as UTF-8, then decode with replacement.
    """
    match = from_bytes(raw).best()
    decode_used = match.encoding if match is not None else "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
        decode_used = "utf-8-sig"

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError:
            text = raw.decode("utf-8", errors="replace")

    return text.replace("\r\n", "\n").replace("\r", "\n")


def escape_field(value: Any) -> str:
    text = cell_to_text(value).replace(CSV_QUOTE, CSV_QUOTE * 2)
    if CSV_DELIMITER in text or CSV_QUOTE in text:
        text = CSV_QUOTE + text + CSV_QUOTE
    return text


def split_line(line: str) -> List[str]:
    """Split one data line; commas inside quotes do not separate fields."""
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for ch in line:
        if ch == CSV_QUOTE:
            in_quotes = not in_quotes
        elif ch == CSV_DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    fields.append("".join(current))
    return fields


def split_header(line: str) -> List[str]:
    # Trailing empty names are discarded, as a regex split would.
    names = line.split(CSV_DELIMITER)
    if CSV_DELIMITER in line:
        while names and names[-1] == "":
            names.pop()
    return names


def encode(table: Table) -> bytes:
    if not table:
        return b""

    headers = list(table[0].keys())
    lines = [CSV_DELIMITER.join(headers)]
    for row in table:
        lines.append(CSV_DELIMITER.join(escape_field(row.get(h)) for h in headers))

    return "".join(line + CSV_LINE_TERMINATOR for line in lines).encode(OUTPUT_ENCODING)


def decode(raw: bytes) -> List[Dict[str, Any]]:
    if not raw:
        return []

    text = decode_text(raw)
    lines = text.split("\n")
    # A final line break terminates the last line; it does not start a new one.
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        return []

    headers = split_header(lines[0])
    rows: List[Dict[str, Any]] = []
    for line in lines[1:]:
        values = split_line(line)
        row: Dict[str, Any] = {}
        for i, header in enumerate(headers):
            row[header.strip()] = values[i].strip() if i < len(values) else ""
        rows.append(row)

    return rows
