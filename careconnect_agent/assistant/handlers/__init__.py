"""
Intent handlers for the response generator.
"""

from .base import AssistantServices, BaseHandler, HandlerContext
from .search import ServiceSearchHandler, JobSearchHandler
from .booking import BookingHandler, StatusInquiryHandler
from .static import HelpHandler, ProfileHandler
from .general import GeneralHandler, CLARIFICATION_PROMPTS

__all__ = [
    "AssistantServices",
    "BaseHandler",
    "HandlerContext",
    "ServiceSearchHandler",
    "JobSearchHandler",
    "BookingHandler",
    "StatusInquiryHandler",
    "HelpHandler",
    "ProfileHandler",
    "GeneralHandler",
    "CLARIFICATION_PROMPTS",
]
