"""
Intent-related enums.
"""

from enum import Enum


class IntentType(str, Enum):
    """What the user is trying to do."""

    BOOKING = "booking"
    JOB_SEARCH = "job_search"
    SERVICE_SEARCH = "service_search"
    HELP = "help"
    PROFILE = "profile"
    STATUS_INQUIRY = "status_inquiry"
    GENERAL = "general"


class ServiceCategory(str, Enum):
    """Service category labels attached to service searches."""

    MBBS = "mbbs"
    MENTAL = "mental"
    PLACEMENT = "placement"
    LEGAL = "legal"
    PATHOLOGY = "pathology"
    PHARMACY = "pharmacy"
    OTHER = "other"
