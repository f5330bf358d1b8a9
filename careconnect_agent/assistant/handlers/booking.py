"""
Booking and booking-status handlers.
"""

import asyncio
from datetime import datetime
from typing import Optional

from .base import AssistantServices, BaseHandler, HandlerContext, auth_required
from ..formatting import format_booking, format_booking_candidate, format_consultation
from ...config import Settings
from ...core.models import ChatResponse
from ...core.models.professional import professionals_to_payload
from ...utils.date import format_date

BOOKING_LOGIN_QUICK_REPLIES = ["Login", "Register", "Learn more"]
MAX_NAME_REPLIES = 3
MAX_BOOKINGS_SHOWN = 3
MAX_CONSULTATIONS_SHOWN = 2


class BookingHandler(BaseHandler):
    """
    Starts a booking by offering professionals to choose from.

    Browsing candidates does not need a signed-in user; creating the booking
    (:meth:`confirm`) does.
    """

    async def handle(self, ctx: HandlerContext) -> ChatResponse:
        filters = ctx.filters.with_limit(ctx.settings.booking_candidate_limit)
        professionals = await ctx.services.professionals.search_professionals(filters)

        if not professionals:
            return ChatResponse(
                text=(
                    "I'd be happy to help you book an appointment! Let me first show you "
                    "available professionals. What type of service are you looking for?"
                ),
                type="booking_start",
                quick_replies=["Healthcare", "Mental Health", "Legal Services", "Financial Advice"],
            )

        listing = "\n\n".join(format_booking_candidate(p) for p in professionals)
        text = (
            f"Here are some available professionals:\n\n{listing}\n\n"
            "Which professional would you like to book with?"
        )
        if not ctx.user_id:
            text += "\n\nYou'll need to log in to confirm the booking."

        return ChatResponse(
            text=text,
            type="booking_selection",
            data=professionals_to_payload(professionals),
            quick_replies=[p.name for p in professionals[:MAX_NAME_REPLIES]] + ["View more options"],
        )

    async def confirm(
        self,
        services: AssistantServices,
        settings: Settings,
        user_id: Optional[str],
        professional_id: str,
        appointment_at: datetime,
        service_type: Optional[str] = None,
    ) -> ChatResponse:
        """Create a pending booking for a signed-in user."""
        if not user_id:
            return auth_required(
                "To book an appointment, please log in to your account first.",
                list(BOOKING_LOGIN_QUICK_REPLIES),
            )

        professional = await services.professionals.get_professional_by_id(professional_id)
        if professional is None:
            return ChatResponse(
                text="I couldn't find that professional. They may no longer be accepting bookings.",
                type="not_found",
                quick_replies=["Browse professionals", "Main menu"],
            )

        booking = await services.bookings.create_booking(
            user_id,
            professional.id,
            appointment_at,
            service_type=service_type or professional.specialization,
        )
        when = format_date(booking.appointment_date, settings.timezone)
        return ChatResponse(
            text=(
                f"Your appointment request with {professional.name} on {when} has been sent. "
                "I'll let you know once it's confirmed."
            ),
            type="booking_created",
            data=booking.model_dump(mode="json"),
            quick_replies=["View my bookings", "Book another", "Main menu"],
        )


class StatusInquiryHandler(BaseHandler):
    """Summarises a user's bookings and active consultations."""

    async def handle(self, ctx: HandlerContext) -> ChatResponse:
        if not ctx.user_id:
            return auth_required(
                "To check your bookings and consultations, please log in to your account.",
                ["Login", "Register"],
            )

        bookings, consultations = await asyncio.gather(
            ctx.services.bookings.get_user_bookings(ctx.user_id),
            ctx.services.bookings.get_active_consultations(ctx.user_id),
        )

        if not bookings and not consultations:
            return ChatResponse(
                text=(
                    "You don't have any active bookings or consultations at the moment. "
                    "Would you like to book a service?"
                ),
                type="no_bookings",
                quick_replies=["Book service", "Browse professionals", "Get help"],
            )

        tz_name = ctx.settings.timezone
        text = ""
        if bookings:
            text += "**Your Recent Bookings:**\n"
            text += "".join(format_booking(b, tz_name) for b in bookings[:MAX_BOOKINGS_SHOWN])
        if consultations:
            text += "**Active Consultations:**\n"
            text += "".join(
                format_consultation(c, tz_name) for c in consultations[:MAX_CONSULTATIONS_SHOWN]
            )

        return ChatResponse(
            text=text.rstrip(),
            type="status_summary",
            data={
                "bookings": [b.model_dump(mode="json") for b in bookings],
                "consultations": [c.model_dump(mode="json") for c in consultations],
            },
            quick_replies=["View all bookings", "Book new service", "Reschedule", "Cancel booking"],
        )
