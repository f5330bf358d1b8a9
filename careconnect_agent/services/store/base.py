"""
Backend-neutral query description and the document store interface.

Queries are built from the primitives every backend supports: field filters
(``==``, ``!=``, ``<``, ``<=``, ``>``, ``>=``, ``in``, ``array-contains``),
ordering and a result limit. Read results are plain dicts tagged with ``id``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

Document = Dict[str, Any]

SUPPORTED_OPERATORS = ("==", "!=", "<", "<=", ">", ">=", "in", "not-in", "array-contains")


class Direction(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class FieldFilter:
    field: str
    op: str
    value: Any

    def __post_init__(self):
        if self.op not in SUPPORTED_OPERATORS:
            raise ValueError(f"Unsupported operator: {self.op}")


@dataclass(frozen=True)
class OrderBy:
    field: str
    direction: Direction = Direction.ASCENDING


@dataclass
class Query:
    """A read against a single collection."""

    collection: str
    filters: List[FieldFilter] = field(default_factory=list)
    order_by: List[OrderBy] = field(default_factory=list)
    limit: Optional[int] = None

    def where(self, field_name: str, op: str, value: Any) -> "Query":
        self.filters.append(FieldFilter(field_name, op, value))
        return self

    def order(self, field_name: str, direction: Direction = Direction.ASCENDING) -> "Query":
        self.order_by.append(OrderBy(field_name, direction))
        return self

    def take(self, count: Optional[int]) -> "Query":
        self.limit = count
        return self


class DocumentStore(ABC):
    """Minimal async document store used by the repository layer."""

    @abstractmethod
    async def query(self, query: Query) -> List[Document]:
        """Run ``query`` and return matching documents tagged with ``id``."""

    @abstractmethod
    async def get(self, collection: str, document_id: str) -> Optional[Document]:
        """Fetch one document, or ``None`` when it does not exist."""

    @abstractmethod
    async def add(self, collection: str, data: Document) -> str:
        """Insert a document with a generated id and return the id."""

    @abstractmethod
    async def update(self, collection: str, document_id: str, data: Document) -> None:
        """Merge ``data`` into an existing document.

        Raises:
            DocumentNotFoundError: if the document does not exist
        """

    async def close(self) -> None:
        """Release backend resources."""
        return None
