"""
User-related data models.
"""

from datetime import datetime
from typing import Any, Dict, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field

from ...utils.fields import first_non_empty, to_datetime, to_text


class UserProfile(BaseModel):
    """User account profile."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    preferences: Dict[str, Any] = Field(default_factory=dict)
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "UserProfile":
        full_name = f"{doc.get('first_name') or ''} {doc.get('last_name') or ''}".strip()
        preferences = doc.get("preferences")
        return cls(
            id=str(doc["id"]),
            name=full_name or to_text(first_non_empty(doc, "displayName", "name", "username")),
            email=to_text(doc.get("email")),
            phone=to_text(first_non_empty(doc, "phone", "phoneNumber")),
            preferences=dict(preferences) if isinstance(preferences, dict) else {},
            updated_at=to_datetime(doc.get("updatedAt")),
        )


class Notification(BaseModel):
    """In-app notification."""

    model_config = ConfigDict(extra="forbid")

    id: str
    user_id: str
    title: Optional[str] = None
    message: Optional[str] = None
    type: Optional[str] = None
    read: bool = False
    created_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Notification":
        return cls(
            id=str(doc["id"]),
            user_id=str(doc.get("userId") or ""),
            title=to_text(doc.get("title")),
            message=to_text(first_non_empty(doc, "message", "body")),
            type=to_text(doc.get("type")),
            read=doc.get("read") is True,
            created_at=to_datetime(doc.get("createdAt")),
        )
