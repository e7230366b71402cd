"""Helpers for reading loosely-typed records out of the key-value store."""

from datetime import date
from uuid import uuid4


def generate_id() -> str:
    """Return a new short record id."""
    return uuid4().hex[:12]


def today_str() -> str:
    """Return today's date as ``YYYY-MM-DD``."""
    return date.today().isoformat()


def as_list(value: object) -> list[dict[str, object]]:
    """Return dict rows of a stored list, ignoring anything else."""
    if not isinstance(value, list):
        return []
    return [row for row in value if isinstance(row, dict)]


def as_float(value: object, default: float = 0.0) -> float:
    """Convert a stored value to float."""
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def as_int(value: object, default: int = 0) -> int:
    """Convert a stored value to int."""
    try:
        return int(float(value))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
