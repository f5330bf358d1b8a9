"""
Configuration management for the CareConnect agent.
"""

from .settings import Settings, get_settings
from .database import DatabaseConfig

__all__ = [
    "Settings",
    "get_settings",
    "DatabaseConfig",
]
