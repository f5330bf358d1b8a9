"""
FastAPI application factory and configuration.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..assistant import ResponseGenerator
from ..config import Settings, get_settings
from ..container import build_response_generator
from ..utils.logging import configure_logging
from .middleware import SecurityHeaders, LoggingMiddleware
from .handlers import ChatHandler, HealthHandler


def create_app(
    generator: Optional[ResponseGenerator] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    generator = generator or build_response_generator(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await generator.context_store.close()

    app = FastAPI(
        title=settings.app_name,
        description="Chat assistant for finding professionals, jobs and bookings",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.generator = generator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeaders)
    app.add_middleware(LoggingMiddleware)

    health_handler = HealthHandler(settings)
    chat_handler = ChatHandler(generator)

    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    app.include_router(chat_handler.router, tags=["chat"])

    return app
