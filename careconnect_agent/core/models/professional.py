"""
Professional directory models.
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..enums import VerificationStatus
from ...utils.fields import first_non_empty, to_datetime, to_float, to_int, to_list, to_text


class Professional(BaseModel):
    """Canonical professional record built from a stored document."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str = "Professional"
    specialization: Optional[str] = None
    category: Optional[str] = None
    professional_type_id: Optional[str] = None
    professional_type_label: Optional[str] = None
    rating: Optional[float] = None
    price: Optional[float] = None
    years_of_experience: Optional[int] = None
    verification_status: VerificationStatus = VerificationStatus.PENDING
    location: Optional[str] = None
    languages: List[str] = Field(default_factory=list)
    is_available_online: bool = False
    is_available_in_person: bool = False
    available_slots: List[Any] = Field(default_factory=list)
    next_available: Optional[str] = None
    biography: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Professional":
        """Map a stored document (with ``id``) onto the canonical shape."""
        full_name = f"{doc.get('first_name') or ''} {doc.get('last_name') or ''}".strip()
        name = full_name or first_non_empty(doc, "name", "full_name", "displayName", "username")

        type_id = doc.get("professional_type_id")
        slots = first_non_empty(doc, "available_slots", "availableSlots", "slots")
        next_available = doc.get("next_available")

        return cls(
            id=str(doc["id"]),
            name=str(name) if name else "Professional",
            specialization=to_text(first_non_empty(doc, "specialization", "specialty", "category")),
            category=to_text(doc.get("category")),
            professional_type_id=str(type_id) if type_id is not None and type_id != "" else None,
            professional_type_label=to_text(doc.get("professional_type_label")),
            rating=to_float(first_non_empty(doc, "rating", "average_rating", "averageRating")),
            price=to_float(first_non_empty(doc, "price", "consultation_fee", "hourly_rate", "fee", "rate")),
            years_of_experience=to_int(
                first_non_empty(doc, "years_of_experience", "experience", "experience_years")
            ),
            verification_status=VerificationStatus.from_string(
                first_non_empty(doc, "verification_status", "professionalStatus")
            ),
            location=to_text(first_non_empty(doc, "address", "location")),
            languages=to_list(first_non_empty(doc, "languages_spoken", "languages")),
            is_available_online=bool(doc.get("is_available_online", False)),
            is_available_in_person=bool(doc.get("is_available_in_person", False)),
            available_slots=list(slots) if isinstance(slots, (list, tuple)) else [],
            next_available=str(next_available) if next_available else None,
            biography=to_text(doc.get("biography")),
            created_at=to_datetime(doc.get("createdAt")),
        )

    @property
    def is_verified(self) -> bool:
        return self.verification_status == VerificationStatus.VERIFIED

    def display_specialization(self, default: str = "General practice") -> str:
        return self.professional_type_label or self.specialization or default


class ProfessionalType(BaseModel):
    """Lookup entry mapping a type id to a display label."""

    model_config = ConfigDict(extra="forbid")

    id: str
    label: str
    name: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "ProfessionalType":
        label = first_non_empty(doc, "title", "label", "name")
        return cls(
            id=str(doc["id"]),
            label=str(label) if label else str(doc["id"]),
            name=doc.get("name") or None,
        )

    def matches(self, text: str) -> bool:
        """Case-insensitive match against name or label."""
        needle = text.strip().lower()
        return any(
            candidate and candidate.strip().lower() == needle
            for candidate in (self.name, self.label)
        )


class Specialization(BaseModel):
    """Specialization entry."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    is_active: bool = True
    description: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Specialization":
        return cls(
            id=str(doc["id"]),
            name=str(doc.get("name") or ""),
            is_active=bool(doc.get("isActive", True)),
            description=doc.get("description") or None,
        )


def professionals_to_payload(professionals: List[Professional]) -> List[Dict[str, Any]]:
    """JSON-ready list for response payloads."""
    return [p.model_dump(mode="json") for p in professionals]
