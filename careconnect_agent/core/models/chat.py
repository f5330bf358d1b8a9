"""
Chat-related data models.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..enums import IntentType
from .job import JobListing
from .professional import Professional, Specialization


class ChatResponse(BaseModel):
    """Reply returned to the chat UI."""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    type: str
    quick_replies: List[str] = Field(default_factory=list, alias="quickReplies")
    data: Optional[Any] = None


class ConversationContext(BaseModel):
    """What the assistant remembers about a user's last turn."""

    model_config = ConfigDict(extra="allow")

    last_intent: Optional[IntentType] = None
    last_category: Optional[str] = None
    last_filters: Dict[str, Any] = Field(default_factory=dict)
    last_message: Optional[str] = None


class SearchAllResults(BaseModel):
    """Combined results of a cross-collection search."""

    model_config = ConfigDict(extra="forbid")

    professionals: List[Professional] = Field(default_factory=list)
    jobs: List[JobListing] = Field(default_factory=list)
    specializations: List[Specialization] = Field(default_factory=list)

    def has_matches(self) -> bool:
        return bool(self.professionals or self.jobs)
