"""
Chat assistant: intent classification, filter extraction and replies.
"""

from .classifier import IntentClassifier
from .extractor import FilterExtractor
from .generator import ResponseGenerator
from .handlers import AssistantServices

__all__ = [
    "IntentClassifier",
    "FilterExtractor",
    "ResponseGenerator",
    "AssistantServices",
]
