"""
Job placement service module.
"""

from .service import JobService

__all__ = ["JobService"]
