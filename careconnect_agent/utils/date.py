"""
Date formatting utilities.
"""

from datetime import datetime
from typing import Any, Optional
import pytz

from .fields import to_datetime


def format_date(value: Any, tz_name: str = "Asia/Kolkata", default: str = "Date to be confirmed") -> str:
    """Format a stored timestamp as a short local date, e.g. ``Jan 15, 2025``."""
    dt: Optional[datetime] = to_datetime(value)
    if dt is None:
        return default

    tz = pytz.timezone(tz_name)
    if dt.tzinfo is None:
        dt = tz.localize(dt)
    else:
        dt = dt.astimezone(tz)
    return dt.strftime("%b %d, %Y")
