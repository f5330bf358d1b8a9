"""
In-process document store for tests and local development.

Mirrors the Firestore read semantics the repository relies on: a filter or
ordering on a field excludes documents that lack the field, values compare
only within the same type class (numbers, strings, timestamps), and ordering
across type classes follows Firestore's type order.
"""

import copy
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from .base import Direction, Document, DocumentStore, FieldFilter, Query
from ...core.exceptions import DocumentNotFoundError

_MISSING = object()


def _type_class(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return 1
    if isinstance(value, (int, float)):
        return 2
    if isinstance(value, datetime):
        return 3
    if isinstance(value, str):
        return 4
    if isinstance(value, (list, tuple)):
        return 6
    if isinstance(value, dict):
        return 7
    return 8


def _comparable(value: Any) -> Any:
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _equals(left: Any, right: Any) -> bool:
    if _type_class(left) != _type_class(right):
        return False
    return _comparable(left) == _comparable(right)


def _compare(left: Any, right: Any) -> Optional[int]:
    """Three-way compare within one type class, None when incomparable."""
    if _type_class(left) != _type_class(right) or _type_class(left) not in (2, 3, 4):
        return None
    a, b = _comparable(left), _comparable(right)
    return (a > b) - (a < b)


def _matches(doc: Document, flt: FieldFilter) -> bool:
    value = doc.get(flt.field, _MISSING)
    if value is _MISSING:
        return False

    if flt.op == "==":
        return _equals(value, flt.value)
    if flt.op == "!=":
        return value is not None and not _equals(value, flt.value)
    if flt.op == "in":
        return any(_equals(value, candidate) for candidate in flt.value)
    if flt.op == "not-in":
        return value is not None and not any(_equals(value, c) for c in flt.value)
    if flt.op == "array-contains":
        return isinstance(value, (list, tuple)) and any(_equals(item, flt.value) for item in value)

    result = _compare(value, flt.value)
    if result is None:
        return False
    if flt.op == "<":
        return result < 0
    if flt.op == "<=":
        return result <= 0
    if flt.op == ">":
        return result > 0
    return result >= 0


def _sort_key(value: Any):
    type_class = _type_class(value)
    if type_class in (2, 3, 4):
        return (type_class, _comparable(value))
    if type_class == 1:
        return (type_class, int(value))
    return (type_class, 0)


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed document store."""

    def __init__(self, collections: Optional[Dict[str, Iterable[Document]]] = None):
        self._collections: Dict[str, Dict[str, Document]] = {}
        for name, docs in (collections or {}).items():
            self.seed(name, docs)

    def seed(self, collection: str, docs: Iterable[Document]) -> List[str]:
        """Insert documents as-is; an ``id`` key is used as the document id."""
        ids = []
        bucket = self._collections.setdefault(collection, {})
        for doc in docs:
            data = copy.deepcopy(dict(doc))
            doc_id = str(data.pop("id", None) or uuid.uuid4().hex[:20])
            bucket[doc_id] = data
            ids.append(doc_id)
        return ids

    def documents(self, collection: str) -> List[Document]:
        """Snapshot of every document in a collection."""
        return [
            {"id": doc_id, **copy.deepcopy(data)}
            for doc_id, data in self._collections.get(collection, {}).items()
        ]

    async def query(self, query: Query) -> List[Document]:
        docs = self.documents(query.collection)

        for flt in query.filters:
            docs = [doc for doc in docs if _matches(doc, flt)]

        for order in query.order_by:
            docs = [doc for doc in docs if order.field in doc]
        for order in reversed(query.order_by):
            docs.sort(
                key=lambda doc: _sort_key(doc[order.field]),
                reverse=order.direction == Direction.DESCENDING,
            )

        if query.limit is not None:
            docs = docs[: query.limit]
        return docs

    async def get(self, collection: str, document_id: str) -> Optional[Document]:
        data = self._collections.get(collection, {}).get(document_id)
        if data is None:
            return None
        return {"id": document_id, **copy.deepcopy(data)}

    async def add(self, collection: str, data: Document) -> str:
        document_id = uuid.uuid4().hex[:20]
        self._collections.setdefault(collection, {})[document_id] = copy.deepcopy(dict(data))
        return document_id

    async def update(self, collection: str, document_id: str, data: Document) -> None:
        bucket = self._collections.get(collection, {})
        if document_id not in bucket:
            raise DocumentNotFoundError(collection, document_id)
        bucket[document_id].update(copy.deepcopy(dict(data)))
