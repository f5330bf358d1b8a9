"""
Booking service for appointments, consultations and availability.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..store import Direction, DocumentStore, Query
from ...config import Settings, get_settings
from ...core.enums import BookingStatus, ConsultationStatus
from ...core.exceptions import (
    AuthenticationRequiredError,
    BookingNotFoundError,
    InvalidStatusTransitionError,
)
from ...core.models import AvailabilitySlot, Booking, Consultation
from ...utils.logging import get_logger

logger = get_logger("careconnect.booking")

USER_BOOKINGS_LIMIT = 20
ACTIVE_CONSULTATIONS_LIMIT = 10


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookingService:
    """Service for handling appointment bookings."""

    def __init__(self, store: DocumentStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or get_settings()
        self.collections = self.settings.database

    async def create_booking(
        self,
        client_id: Optional[str],
        professional_id: str,
        appointment_at: datetime,
        service_type: Optional[str] = None,
        notes: Optional[str] = None,
        **extra: Any,
    ) -> Booking:
        """
        Create a pending booking.

        Booking creation and any later status change are separate writes;
        a booking that is never confirmed stays ``pending``.

        Raises:
            AuthenticationRequiredError: if ``client_id`` is empty
        """
        if not client_id:
            raise AuthenticationRequiredError("A signed-in user is required to book")

        now = _utcnow()
        data: Dict[str, Any] = {
            **extra,
            "clientId": client_id,
            "professionalId": professional_id,
            "appointmentDate": appointment_at,
            "status": BookingStatus.PENDING.value,
            "createdAt": now,
            "updatedAt": now,
        }
        if service_type:
            data["serviceType"] = service_type
        if notes:
            data["notes"] = notes

        try:
            booking_id = await self.store.add(self.collections.bookings, data)
        except Exception as e:
            logger.error(f"Error creating booking: {e}")
            raise

        logger.info(f"Created booking {booking_id} for client {client_id}")
        return Booking.from_document({"id": booking_id, **data})

    async def get_booking(self, booking_id: str) -> Optional[Booking]:
        try:
            doc = await self.store.get(self.collections.bookings, booking_id)
        except Exception as e:
            logger.error(f"Error getting booking {booking_id}: {e}")
            raise
        return Booking.from_document(doc) if doc else None

    async def get_user_bookings(
        self, user_id: str, status: Optional[BookingStatus] = None
    ) -> List[Booking]:
        """Most recent bookings for a client, newest appointment first."""
        query = Query(self.collections.bookings).where("clientId", "==", user_id)
        if status:
            query.where("status", "==", BookingStatus(status).value)
        query.order("appointmentDate", Direction.DESCENDING).take(USER_BOOKINGS_LIMIT)

        try:
            docs = await self.store.query(query)
        except Exception as e:
            logger.error(f"Error getting user bookings: {e}")
            raise
        return [Booking.from_document(doc) for doc in docs]

    async def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking:
        """
        Move a booking to a new status.

        Raises:
            BookingNotFoundError: if the booking does not exist
            InvalidStatusTransitionError: if the change is not allowed
        """
        target = BookingStatus(status)
        booking = await self.get_booking(booking_id)
        if booking is None:
            raise BookingNotFoundError(f"Booking {booking_id} not found")
        if not booking.status.can_transition_to(target):
            raise InvalidStatusTransitionError(booking.status.value, target.value)

        now = _utcnow()
        try:
            await self.store.update(
                self.collections.bookings,
                booking_id,
                {"status": target.value, "updatedAt": now},
            )
        except Exception as e:
            logger.error(f"Error updating booking status: {e}")
            raise

        logger.info(f"Booking {booking_id}: {booking.status.value} -> {target.value}")
        return booking.model_copy(update={"status": target, "updated_at": now})

    async def get_active_consultations(self, user_id: str) -> List[Consultation]:
        """Scheduled or ongoing consultations, soonest first."""
        query = (
            Query(self.collections.consultations)
            .where("client_id", "==", user_id)
            .where("status", "in", [s.value for s in ConsultationStatus.active()])
            .order("scheduled_time", Direction.ASCENDING)
            .take(ACTIVE_CONSULTATIONS_LIMIT)
        )
        try:
            docs = await self.store.query(query)
        except Exception as e:
            logger.error(f"Error getting active consultations: {e}")
            raise
        return [Consultation.from_document(doc) for doc in docs]

    async def get_professional_availability(
        self, professional_id: str, start_date: datetime, end_date: datetime
    ) -> List[AvailabilitySlot]:
        """Availability slots starting within ``[start_date, end_date]``."""
        query = (
            Query(self.collections.availability_slots)
            .where("professional_id", "==", professional_id)
            .where("start_date", ">=", start_date)
            .where("start_date", "<=", end_date)
            .order("start_date", Direction.ASCENDING)
        )
        try:
            docs = await self.store.query(query)
        except Exception as e:
            logger.error(f"Error getting professional availability: {e}")
            raise
        return [AvailabilitySlot.from_document(doc) for doc in docs]
