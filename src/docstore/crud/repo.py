from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.crud.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Upsert doc, generating an id if it has none. Return the stored document."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str | None) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None) -> list[Document]:
        """Return stored documents matching every criterion set on request."""
        raise NotImplementedError
