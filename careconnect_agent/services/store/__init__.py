"""
Document store adapters.
"""

from .base import DocumentStore, FieldFilter, OrderBy, Query, Direction
from .memory import InMemoryDocumentStore
from .firestore import FirestoreDocumentStore

__all__ = [
    "DocumentStore",
    "FieldFilter",
    "OrderBy",
    "Query",
    "Direction",
    "InMemoryDocumentStore",
    "FirestoreDocumentStore",
]
