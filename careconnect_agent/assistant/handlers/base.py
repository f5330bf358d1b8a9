"""
Base handler and context classes for intent handlers.
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from ...config import Settings
from ...core.models import ChatResponse, Intent, SearchFilters
from ...services.booking import BookingService
from ...services.jobs import JobService
from ...services.professionals import ProfessionalService
from ...services.search import SearchService


@dataclass
class AssistantServices:
    """Repository services the handlers read from."""

    professionals: ProfessionalService
    jobs: JobService
    bookings: BookingService
    search: SearchService


@dataclass
class HandlerContext:
    """Everything a handler needs to answer one message."""

    message: str
    intent: Intent
    filters: SearchFilters
    user_id: Optional[str]
    services: AssistantServices
    settings: Settings
    rng: random.Random = field(default_factory=random.Random)


class BaseHandler(ABC):
    """Turns one classified message into a reply."""

    @abstractmethod
    async def handle(self, ctx: HandlerContext) -> ChatResponse:
        """Build the reply for ``ctx``."""


def auth_required(text: str, quick_replies: List[str]) -> ChatResponse:
    return ChatResponse(text=text, type="auth_required", quick_replies=quick_replies)
