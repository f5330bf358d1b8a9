"""
Professional-related enums.
"""

from enum import Enum


class ProfessionalTypeId(str, Enum):
    """Identifiers stored in ``professional_type_id``."""

    MENTAL_HEALTH = "1"
    LEGAL = "2"
    MEDICAL = "3"
    PLACEMENT = "4"
    PATHOLOGY = "5"
    PHARMACY = "6"


class VerificationStatus(str, Enum):
    """Professional verification status."""

    VERIFIED = "verified"
    PENDING = "pending"

    @classmethod
    def from_string(cls, value) -> "VerificationStatus":
        """Convert stored status text (any case) to the enum."""
        if isinstance(value, str) and value.strip().lower() == cls.VERIFIED.value:
            return cls.VERIFIED
        return cls.PENDING


class ProfessionalSort(str, Enum):
    """Sort orders for professional searches."""

    RATING = "rating"
    PRICE_LOW = "price_low"
    PRICE_HIGH = "price_high"
    EXPERIENCE = "experience"
    NEWEST = "newest"
