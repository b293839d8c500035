from __future__ import annotations

# eventhub/services/utils.py
import re
from typing import Any

# SQLite INTEGER is a signed 64-bit value
_MAX_ID = 2**63 - 1
_ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_id(raw: Any) -> int | None:
    """Path identifiers that are not plain ASCII integers can never match a row."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        val = raw
    else:
        s = str(raw).strip()
        if not _ID_RE.fullmatch(s):
            return None
        val = int(s)
    return val if -_MAX_ID <= val <= _MAX_ID else None


def missing_fields(payload: dict, fields: tuple[str, ...]) -> list[str]:
    # None, "", 0 and false all count as missing
    return [f for f in fields if not payload.get(f)]


def as_text(value: Any) -> str:
    """Stored the way a TEXT column keeps a JSON scalar."""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
