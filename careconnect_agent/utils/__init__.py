"""
Utility modules for the CareConnect agent.
"""

from .fields import first_non_empty, is_empty, to_float, to_int, to_list, to_datetime, to_text
from .text import contains_any
from .date import format_date
from .logging import get_logger, configure_logging

__all__ = [
    "first_non_empty",
    "is_empty",
    "to_float",
    "to_int",
    "to_list",
    "to_datetime",
    "to_text",
    "contains_any",
    "format_date",
    "get_logger",
    "configure_logging",
]
