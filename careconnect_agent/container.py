"""
Wiring of stores, services and the response generator.
"""

from typing import Optional

from .assistant import AssistantServices, ResponseGenerator
from .config import Settings, get_settings
from .services import (
    AnalyticsService,
    BookingService,
    ConversationContextStore,
    InMemoryContextStore,
    JobService,
    ProfessionalService,
    RedisContextStore,
    SearchService,
)
from .services.store import DocumentStore, FirestoreDocumentStore, InMemoryDocumentStore
from .utils.logging import get_logger

logger = get_logger("careconnect.container")


def build_store(settings: Settings) -> DocumentStore:
    if settings.store_backend == "memory":
        logger.info("Using in-memory document store")
        return InMemoryDocumentStore()
    return FirestoreDocumentStore(
        project=settings.firestore_project,
        database=settings.firestore_database,
    )


def build_context_store(settings: Settings) -> ConversationContextStore:
    if settings.context_backend == "redis":
        return RedisContextStore(settings.redis_url, ttl_seconds=settings.context_ttl_seconds)
    return InMemoryContextStore(ttl_seconds=settings.context_ttl_seconds)


def build_response_generator(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
    context_store: Optional[ConversationContextStore] = None,
) -> ResponseGenerator:
    """Build a generator backed by the configured stores."""
    settings = settings or get_settings()
    store = store or build_store(settings)
    context_store = context_store or build_context_store(settings)

    professionals = ProfessionalService(store, settings)
    jobs = JobService(store, settings)
    services = AssistantServices(
        professionals=professionals,
        jobs=jobs,
        bookings=BookingService(store, settings),
        search=SearchService(professionals, jobs, settings),
    )
    return ResponseGenerator(
        services,
        context_store,
        analytics=AnalyticsService(store, settings),
        settings=settings,
    )
