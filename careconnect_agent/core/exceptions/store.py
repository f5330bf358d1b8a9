"""
Storage-related exceptions.
"""


class DocumentStoreError(Exception):
    """Base exception for document store failures."""
    pass


class DocumentNotFoundError(DocumentStoreError):
    """Exception raised when a document to update does not exist."""

    def __init__(self, collection: str, document_id: str):
        super().__init__(f"{collection}/{document_id} not found")
        self.collection = collection
        self.document_id = document_id


class ContextStoreError(Exception):
    """Exception raised when the conversation context backend fails."""
    pass
