"""
Lenient numeric parsing for form input.

Form fields arrive as free text. A value that does not parse becomes 0
instead of a validation error.
"""

from typing import Any


def coerce_float(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return 0.0


def coerce_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return int(float(text))
    except ValueError:
        return 0


def reject_nulls(data: Any) -> Any:
    """Partial updates leave omitted fields alone; an explicit null is not a value."""
    if isinstance(data, dict):
        nulls = sorted(key for key, value in data.items() if value is None)
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
    return data
