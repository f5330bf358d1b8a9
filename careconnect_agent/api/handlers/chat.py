"""
Chat and booking endpoints.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from ...assistant import ResponseGenerator
from ...core.enums import BookingStatus
from ...core.exceptions import BookingNotFoundError, InvalidStatusTransitionError
from ...core.models import ChatResponse
from ...utils.logging import get_logger

logger = get_logger("careconnect.api.chat")


class ChatRequest(BaseModel):
    """Incoming chat message."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    message: str = Field(min_length=1)
    user_id: Optional[str] = Field(default=None, alias="userId")
    client_context: Optional[Dict[str, Any]] = Field(default=None, alias="clientContext")


class BookingRequest(BaseModel):
    """Request to book a chosen professional."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    user_id: Optional[str] = Field(default=None, alias="userId")
    professional_id: str = Field(alias="professionalId")
    appointment_at: datetime = Field(alias="appointmentDate")
    service_type: Optional[str] = Field(default=None, alias="serviceType")


class StatusUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: BookingStatus


class ChatHandler:
    """Handler for chat and booking endpoints."""

    def __init__(self, generator: ResponseGenerator):
        self.generator = generator
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        @self.router.post(
            "/chat",
            response_model=ChatResponse,
            response_model_exclude_none=True,
        )
        async def chat(request: ChatRequest):
            """Answer one chat message."""
            return await self.generator.generate_response(
                request.message,
                user_id=request.user_id,
                client_context=request.client_context,
            )

        @self.router.post(
            "/bookings",
            response_model=ChatResponse,
            response_model_exclude_none=True,
        )
        async def create_booking(request: BookingRequest):
            """Create a pending booking with a professional."""
            return await self.generator.confirm_booking(
                request.user_id,
                request.professional_id,
                request.appointment_at,
                service_type=request.service_type,
            )

        @self.router.patch("/bookings/{booking_id}/status")
        async def update_booking_status(booking_id: str, request: StatusUpdateRequest):
            try:
                booking = await self.generator.services.bookings.update_booking_status(
                    booking_id, request.status
                )
            except BookingNotFoundError as e:
                raise HTTPException(status_code=404, detail=str(e)) from e
            except InvalidStatusTransitionError as e:
                logger.warning(f"Rejected status change for booking {booking_id}: {e}")
                raise HTTPException(status_code=409, detail=str(e)) from e
            return booking.model_dump(mode="json")
