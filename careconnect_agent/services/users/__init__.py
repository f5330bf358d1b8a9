"""
User profile and notification service module.
"""

from .service import UserService

__all__ = ["UserService"]
