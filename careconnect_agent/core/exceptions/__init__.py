"""
Custom exceptions for the CareConnect agent.
"""

from .store import DocumentStoreError, DocumentNotFoundError, ContextStoreError
from .booking import (
    BookingError,
    BookingNotFoundError,
    InvalidStatusTransitionError,
    AuthenticationRequiredError,
)

__all__ = [
    "DocumentStoreError",
    "DocumentNotFoundError",
    "ContextStoreError",
    "BookingError",
    "BookingNotFoundError",
    "InvalidStatusTransitionError",
    "AuthenticationRequiredError",
]
