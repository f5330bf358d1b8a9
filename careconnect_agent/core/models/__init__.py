"""
Core data models for the CareConnect agent.
"""

from .filters import SearchFilters
from .intent import Intent
from .professional import Professional, ProfessionalType, Specialization
from .category import ResolvedCategory, UnknownCategory, CategoryResolution
from .job import JobListing
from .booking import Booking, Consultation, AvailabilitySlot
from .user import UserProfile, Notification
from .chat import ChatResponse, ConversationContext, SearchAllResults

__all__ = [
    "SearchFilters",
    "Intent",
    "Professional",
    "ProfessionalType",
    "Specialization",
    "ResolvedCategory",
    "UnknownCategory",
    "CategoryResolution",
    "JobListing",
    "Booking",
    "Consultation",
    "AvailabilitySlot",
    "UserProfile",
    "Notification",
    "ChatResponse",
    "ConversationContext",
    "SearchAllResults",
]
