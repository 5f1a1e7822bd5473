"""
shield_core.utils
-----------------
Timestamp helpers and deterministic JSON serialization.
Exports must be byte-identical across runs, so JSON here never sorts keys:
field order is whatever the caller built.
"""

from __future__ import annotations
import json, time
from datetime import datetime, timezone
from typing import Any, Dict, Union

Timestamp = Union[str, datetime]


def now_ts() -> str:
    # RFC3339 / ISO 8601 in UTC, second precision
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_ts(value: Timestamp) -> datetime:
    """Parse an ISO-8601 string (``Z`` allowed) or pass a datetime through.

    Naive values are taken to be UTC so that comparisons never mix
    naive and aware datetimes.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        s = value.strip()
        if s.endswith(("Z", "z")):
            s = s[:-1] + "+00:00"
        dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_ts(value: Timestamp) -> str:
    if isinstance(value, str):
        return value
    return parse_ts(value).isoformat().replace("+00:00", "Z")


def subtract_years(dt: datetime, years: int) -> datetime:
    """Calendar-year subtraction. Feb 29 rolls forward to Mar 1 when the target year has none."""
    try:
        return dt.replace(year=dt.year - years)
    except ValueError:
        return dt.replace(year=dt.year - years, month=3, day=1)


def pretty_json(obj: Dict[str, Any], indent: int = 2) -> str:
    # Deterministic, insertion-ordered JSON for human review and diffing
    return json.dumps(obj, indent=indent, ensure_ascii=False)
