"""
Analytics service module.
"""

from .service import AnalyticsService

__all__ = ["AnalyticsService"]
