"""
Response generator: classifies a message, dispatches it to an intent handler
and remembers the turn for follow-up refinements.
"""

import random
from datetime import datetime
from typing import Any, Dict, Optional

from .classifier import IntentClassifier
from .extractor import FilterExtractor
from .formatting import get_contextual_quick_replies
from .handlers import (
    AssistantServices,
    BaseHandler,
    BookingHandler,
    GeneralHandler,
    HandlerContext,
    HelpHandler,
    JobSearchHandler,
    ProfileHandler,
    ServiceSearchHandler,
    StatusInquiryHandler,
)
from ..config import Settings, get_settings
from ..core.enums import IntentType, ServiceCategory
from ..core.exceptions import ContextStoreError
from ..core.models import ChatResponse, ConversationContext, Intent, SearchFilters
from ..services.analytics import AnalyticsService
from ..services.memory import ConversationContextStore
from ..utils.logging import get_logger

logger = get_logger("careconnect.assistant.generator")

ERROR_TEXT = "I'm sorry, I encountered an error while processing your request. Please try again."
ERROR_QUICK_REPLIES = ["Try again", "Contact support", "Main menu"]

REFINABLE_INTENTS = (IntentType.SERVICE_SEARCH, IntentType.JOB_SEARCH)


def error_response() -> ChatResponse:
    return ChatResponse(text=ERROR_TEXT, type="error", quick_replies=list(ERROR_QUICK_REPLIES))


class ResponseGenerator:
    """Entry point for chat messages."""

    def __init__(
        self,
        services: AssistantServices,
        context_store: ConversationContextStore,
        analytics: Optional[AnalyticsService] = None,
        settings: Optional[Settings] = None,
        classifier: Optional[IntentClassifier] = None,
        extractor: Optional[FilterExtractor] = None,
        rng: Optional[random.Random] = None,
    ):
        self.services = services
        self.context_store = context_store
        self.analytics = analytics
        self.settings = settings or get_settings()
        self.classifier = classifier or IntentClassifier()
        self.extractor = extractor or FilterExtractor()
        self.rng = rng or random.Random()

        self.booking_handler = BookingHandler()
        self.handlers: Dict[IntentType, BaseHandler] = {
            IntentType.SERVICE_SEARCH: ServiceSearchHandler(),
            IntentType.JOB_SEARCH: JobSearchHandler(),
            IntentType.BOOKING: self.booking_handler,
            IntentType.STATUS_INQUIRY: StatusInquiryHandler(),
            IntentType.HELP: HelpHandler(),
            IntentType.PROFILE: ProfileHandler(),
            IntentType.GENERAL: GeneralHandler(),
        }

    async def generate_response(
        self,
        text: str,
        user_id: Optional[str] = None,
        client_context: Optional[Dict[str, Any]] = None,
    ) -> ChatResponse:
        """Produce the reply for one user message."""
        intent: Optional[Intent] = None
        try:
            intent = self.classifier.classify(text)
            filters = self.extractor.extract(text)

            if user_id and self.analytics is not None:
                await self.analytics.log_user_interaction(
                    user_id,
                    "chat_message",
                    {
                        "message": text,
                        "intent": intent.as_log_payload(),
                        "filters": filters.as_dict(),
                    },
                    client_context,
                )

            intent, filters = await self._resolve_follow_up(user_id, intent, filters)
            handler = self.handlers.get(intent.type, self.handlers[IntentType.GENERAL])
            ctx = HandlerContext(
                message=text,
                intent=intent,
                filters=filters,
                user_id=user_id,
                services=self.services,
                settings=self.settings,
                rng=self.rng,
            )
            response = await handler.handle(ctx)

            if user_id:
                await self._save_context(
                    user_id,
                    ConversationContext(
                        last_intent=intent.type,
                        last_category=intent.category.value if intent.category else None,
                        last_filters=filters.as_dict(),
                        last_message=text,
                    ),
                )
            return response
        except Exception as e:
            label = intent.type.value if intent is not None else "unclassified"
            logger.error(f"Error generating response for intent {label}: {e}", exc_info=True)
            return error_response()

    async def _load_context(self, user_id: str) -> Optional[ConversationContext]:
        try:
            return await self.context_store.get(user_id)
        except ContextStoreError as e:
            logger.warning(f"Conversation context unavailable for {user_id}: {e}")
            return None

    async def _save_context(self, user_id: str, context: ConversationContext) -> None:
        try:
            await self.context_store.save(user_id, context)
        except ContextStoreError as e:
            logger.warning(f"Could not save conversation context for {user_id}: {e}")

    async def _resolve_follow_up(
        self, user_id: Optional[str], intent: Intent, filters: SearchFilters
    ) -> tuple:
        """Treat a bare refinement ("under 500") as a continuation of the last search."""
        if intent.type != IntentType.GENERAL or not user_id or not filters.has_criteria():
            return intent, filters

        previous = await self._load_context(user_id)
        if previous is None or previous.last_intent not in REFINABLE_INTENTS:
            return intent, filters

        category = None
        if previous.last_category:
            try:
                category = ServiceCategory(previous.last_category)
            except ValueError:
                category = None

        merged = SearchFilters(**previous.last_filters).merged(filters)
        logger.info(f"Treating message as refinement of {previous.last_intent.value}")
        return (
            Intent(type=previous.last_intent, confidence=intent.confidence, category=category),
            merged,
        )

    async def confirm_booking(
        self,
        user_id: Optional[str],
        professional_id: str,
        appointment_at: datetime,
        service_type: Optional[str] = None,
    ) -> ChatResponse:
        """Create a pending booking with the chosen professional."""
        try:
            return await self.booking_handler.confirm(
                self.services,
                self.settings,
                user_id,
                professional_id,
                appointment_at,
                service_type=service_type,
            )
        except Exception as e:
            logger.error(f"Error creating booking with professional {professional_id}: {e}", exc_info=True)
            return error_response()

    def get_contextual_quick_replies(self, message_type: str):
        return get_contextual_quick_replies(message_type)
