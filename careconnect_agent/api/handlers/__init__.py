"""
API handlers.
"""

from .health import HealthHandler
from .chat import ChatHandler

__all__ = [
    "HealthHandler",
    "ChatHandler",
]
