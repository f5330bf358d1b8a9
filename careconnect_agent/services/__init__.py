"""
Service layer for the CareConnect agent.
"""

from .professionals import ProfessionalService, CategoryResolver
from .jobs import JobService
from .booking import BookingService
from .users import UserService
from .analytics import AnalyticsService
from .search import SearchService
from .memory import ConversationContextStore, InMemoryContextStore, RedisContextStore

__all__ = [
    "ProfessionalService",
    "CategoryResolver",
    "JobService",
    "BookingService",
    "UserService",
    "AnalyticsService",
    "SearchService",
    "ConversationContextStore",
    "InMemoryContextStore",
    "RedisContextStore",
]
