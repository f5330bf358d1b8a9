"""
Cross-collection search service module.
"""

from .service import SearchService

__all__ = ["SearchService"]
