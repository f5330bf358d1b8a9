"""
Keyword-based intent classification.
"""

from .keywords import (
    BOOKING_KEYWORDS,
    HELP_KEYWORDS,
    JOB_KEYWORDS,
    PROFILE_KEYWORDS,
    SERVICE_CATEGORIES,
    STATUS_KEYWORDS,
)
from ..core.enums import IntentType
from ..core.models import Intent
from ..utils.text import contains_any


class IntentClassifier:
    """
    Classifies user text into one intent.

    Rules are tested in priority order and the first hit wins:

    1. booking (0.9)
    2. job search (0.8)
    3. service search per category, in table order (0.85)
    4. help (0.7)
    5. profile (0.8)
    6. status inquiry (0.7)
    7. general (0.5)

    Example:
        classifier = IntentClassifier()
        classifier.classify("I need a therapist")
        # Intent(type=SERVICE_SEARCH, confidence=0.85, category=MENTAL)
    """

    def classify(self, message: str) -> Intent:
        text = (message or "").lower()

        if contains_any(text, BOOKING_KEYWORDS):
            return Intent(type=IntentType.BOOKING, confidence=0.9)

        if contains_any(text, JOB_KEYWORDS):
            return Intent(type=IntentType.JOB_SEARCH, confidence=0.8)

        for category, keywords in SERVICE_CATEGORIES.items():
            if contains_any(text, keywords):
                return Intent(type=IntentType.SERVICE_SEARCH, confidence=0.85, category=category)

        if contains_any(text, HELP_KEYWORDS):
            return Intent(type=IntentType.HELP, confidence=0.7)

        if contains_any(text, PROFILE_KEYWORDS):
            return Intent(type=IntentType.PROFILE, confidence=0.8)

        if contains_any(text, STATUS_KEYWORDS):
            return Intent(type=IntentType.STATUS_INQUIRY, confidence=0.7)

        return Intent(type=IntentType.GENERAL, confidence=0.5)
