"""
Booking and consultation models.
"""

from datetime import datetime
from typing import Any, Mapping, Optional
from pydantic import BaseModel, ConfigDict

from ..enums import BookingStatus, ConsultationStatus
from ...utils.fields import first_non_empty, to_datetime, to_text


def _parse_status(value: Any, enum_cls, default):
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            return default
    return default


class Booking(BaseModel):
    """Appointment booking between a client and a professional."""

    model_config = ConfigDict(extra="forbid")

    id: str
    client_id: str
    professional_id: Optional[str] = None
    service_type: Optional[str] = None
    appointment_date: Optional[datetime] = None
    status: BookingStatus = BookingStatus.PENDING
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Booking":
        return cls(
            id=str(doc["id"]),
            client_id=str(first_non_empty(doc, "clientId", "client_id") or ""),
            professional_id=to_text(first_non_empty(doc, "professionalId", "professional_id")),
            service_type=to_text(first_non_empty(doc, "serviceType", "service_type", "type")),
            appointment_date=to_datetime(first_non_empty(doc, "appointmentDate", "appointment_date")),
            status=_parse_status(doc.get("status"), BookingStatus, BookingStatus.PENDING),
            notes=to_text(doc.get("notes")),
            created_at=to_datetime(doc.get("createdAt")),
            updated_at=to_datetime(doc.get("updatedAt")),
        )


class Consultation(BaseModel):
    """Consultation session with a professional."""

    model_config = ConfigDict(extra="forbid")

    id: str
    client_id: str
    professional_id: Optional[str] = None
    type: Optional[str] = None
    status: ConsultationStatus = ConsultationStatus.SCHEDULED
    scheduled_time: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Consultation":
        return cls(
            id=str(doc["id"]),
            client_id=str(first_non_empty(doc, "client_id", "clientId") or ""),
            professional_id=to_text(first_non_empty(doc, "professional_id", "professionalId")),
            type=to_text(first_non_empty(doc, "type", "consultation_type")),
            status=_parse_status(doc.get("status"), ConsultationStatus, ConsultationStatus.SCHEDULED),
            scheduled_time=to_datetime(doc.get("scheduled_time")),
        )


class AvailabilitySlot(BaseModel):
    """Open slot in a professional's calendar."""

    model_config = ConfigDict(extra="forbid")

    id: str
    professional_id: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_booked: bool = False

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "AvailabilitySlot":
        return cls(
            id=str(doc["id"]),
            professional_id=str(doc.get("professional_id") or ""),
            start_date=to_datetime(doc.get("start_date")),
            end_date=to_datetime(doc.get("end_date")),
            is_booked=bool(doc.get("is_booked", False)),
        )
