"""
Intent classification result.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from ..enums import IntentType, ServiceCategory


class Intent(BaseModel):
    """Classified intent with a fixed confidence per rule."""

    model_config = ConfigDict(extra="forbid")

    type: IntentType
    confidence: float
    category: Optional[ServiceCategory] = None

    def as_log_payload(self) -> dict:
        payload = {"type": self.type.value, "confidence": self.confidence}
        if self.category is not None:
            payload["category"] = self.category.value
        return payload
