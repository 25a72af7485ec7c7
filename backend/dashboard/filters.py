"""
List filters shared by every dashboard page.

Each filter is a pure function over a sequence of records, so any two of them
can be applied in either order with the same result.
"""

from collections.abc import Iterable, Sequence
from typing import TypeVar

R = TypeVar("R")

# Wildcard value for exact-match filters (category, status, type)
ALL = "all"


def _text(value) -> str:
    if value is None:
        return ""
    # Enum members compare by their label
    return str(getattr(value, "value", value))


def search(records: Iterable[R], term: str | None, fields: Sequence[str] = ("name", "sku")) -> list[R]:
    """Case-insensitive substring match of ``term`` against any of ``fields``."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(records)
    return [
        record
        for record in records
        if any(needle in _text(getattr(record, field, None)).lower() for field in fields)
    ]


def filter_exact(records: Iterable[R], field: str, value: str | None) -> list[R]:
    """Exact match of ``field`` against ``value``; ``"all"`` or empty matches everything."""
    if value is None or value == "" or value == ALL:
        return list(records)
    return [record for record in records if _text(getattr(record, field, None)) == value]


def distinct(records: Iterable[R], field: str) -> list[str]:
    """Distinct values of ``field`` in first-seen order."""
    seen: dict[str, None] = {}
    for record in records:
        value = _text(getattr(record, field, None))
        if value:
            seen.setdefault(value, None)
    return list(seen)
