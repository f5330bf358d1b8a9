"""
Helpers for reading loosely typed document fields.

Stored documents use several names for the same attribute and mix strings and
numbers freely. These helpers pick the first usable value and coerce it.
"""

from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional


def is_empty(value: Any) -> bool:
    """Return True for values that should fall through to the next alias."""
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def first_non_empty(doc: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-empty value among ``keys``, in order."""
    for key in keys:
        value = doc.get(key)
        if not is_empty(value):
            return value
    return None


def to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.replace(",", "").strip())
        except ValueError:
            return None
    return None


def to_int(value: Any) -> Optional[int]:
    number = to_float(value)
    return int(number) if number is not None else None


def to_list(value: Any) -> List[str]:
    """Accept a list or a comma separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        items: Iterable[Any] = value.split(",")
    elif isinstance(value, (list, tuple, set)):
        items = value
    else:
        items = [value]
    return [str(item).strip() for item in items if not is_empty(item)]


def to_datetime(value: Any) -> Optional[datetime]:
    """Coerce stored timestamps (datetime, epoch seconds or ISO text)."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(float(value), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def to_text(value: Any) -> Optional[str]:
    if is_empty(value):
        return None
    return str(value).strip()
