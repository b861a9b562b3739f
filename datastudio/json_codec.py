from __future__ import annotations

import json
from typing import Any, Dict, List

from .cells import Table
from .errors import DecodeError
from .rules import JSON_INDENT, OUTPUT_ENCODING


def encode(table: Table) -> bytes:
    """Pretty-printed array of objects; values keep their JSON types."""
    return json.dumps(table, indent=JSON_INDENT, ensure_ascii=False).encode(OUTPUT_ENCODING)


def decode(raw: bytes) -> List[Dict[str, Any]]:
    """Parse an array of objects. Anything else is a DecodeError."""
    if not raw.strip():
        return []

    try:
        parsed = json.loads(raw)
    except (UnicodeDecodeError, ValueError) as e:
        raise DecodeError(f"Invalid JSON: {e}") from e

    if not isinstance(parsed, list):
        raise DecodeError(f"Expected a JSON array of objects, got {type(parsed).__name__}")

    for i, item in enumerate(parsed):
        if not isinstance(item, dict):
            raise DecodeError(f"Element {i} is {type(item).__name__}, expected an object")

    return parsed
