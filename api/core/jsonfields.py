"""
JSON column helpers.

asyncpg returns json/jsonb columns as strings unless a codec is registered,
and it does not encode Python dicts for json parameters. We pass JSON as a
string (cast to jsonb in SQL) and parse tolerantly on the way out.
"""

from __future__ import annotations

import json
from typing import Any, Iterable


def json_arg(value: Any) -> str | None:
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=True, default=str)


def safe_json_parse(value: Any) -> Any:
    """
    Parse a JSON string; anything that is not valid JSON comes back unchanged.
    """
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except ValueError:
        return value


def normalize_fields(row: dict[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    out = dict(row)
    for field in fields:
        if field in out:
            out[field] = safe_json_parse(out[field])
    return out
