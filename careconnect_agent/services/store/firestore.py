"""
Firestore-backed document store.
"""

from typing import List, Optional

from google.api_core import exceptions as gcp_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter as FirestoreFieldFilter

from .base import Direction, Document, DocumentStore, Query
from ...core.exceptions import DocumentNotFoundError, DocumentStoreError

_DIRECTIONS = {
    Direction.ASCENDING: firestore.Query.ASCENDING,
    Direction.DESCENDING: firestore.Query.DESCENDING,
}


class FirestoreDocumentStore(DocumentStore):
    """Document store on ``google.cloud.firestore.AsyncClient``."""

    def __init__(
        self,
        client: Optional[firestore.AsyncClient] = None,
        project: Optional[str] = None,
        database: Optional[str] = None,
    ):
        if client is None:
            kwargs = {}
            if project:
                kwargs["project"] = project
            if database:
                kwargs["database"] = database
            client = firestore.AsyncClient(**kwargs)
        self.client = client

    def _build(self, query: Query):
        ref = self.client.collection(query.collection)
        for flt in query.filters:
            ref = ref.where(filter=FirestoreFieldFilter(flt.field, flt.op, flt.value))
        for order in query.order_by:
            ref = ref.order_by(order.field, direction=_DIRECTIONS[order.direction])
        if query.limit is not None:
            ref = ref.limit(query.limit)
        return ref

    async def query(self, query: Query) -> List[Document]:
        try:
            return [
                {"id": snapshot.id, **(snapshot.to_dict() or {})}
                async for snapshot in self._build(query).stream()
            ]
        except gcp_exceptions.GoogleAPIError as e:
            raise DocumentStoreError(f"Query on {query.collection} failed: {e}") from e

    async def get(self, collection: str, document_id: str) -> Optional[Document]:
        try:
            snapshot = await self.client.collection(collection).document(document_id).get()
        except gcp_exceptions.GoogleAPIError as e:
            raise DocumentStoreError(f"Read of {collection}/{document_id} failed: {e}") from e
        if not snapshot.exists:
            return None
        return {"id": snapshot.id, **(snapshot.to_dict() or {})}

    async def add(self, collection: str, data: Document) -> str:
        try:
            _, doc_ref = await self.client.collection(collection).add(data)
        except gcp_exceptions.GoogleAPIError as e:
            raise DocumentStoreError(f"Insert into {collection} failed: {e}") from e
        return doc_ref.id

    async def update(self, collection: str, document_id: str, data: Document) -> None:
        try:
            await self.client.collection(collection).document(document_id).update(data)
        except gcp_exceptions.NotFound as e:
            raise DocumentNotFoundError(collection, document_id) from e
        except gcp_exceptions.GoogleAPIError as e:
            raise DocumentStoreError(f"Update of {collection}/{document_id} failed: {e}") from e
