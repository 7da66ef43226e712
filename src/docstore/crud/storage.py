from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from docstore.crud.models import Document

class DocumentStorage(ABC):
    """Keyed document table: the only state a DocumentManager touches."""

    @abstractmethod
    def get(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def put(self, doc: Document) -> None:
        """Store doc under doc.id, replacing any prior entry."""
        raise NotImplementedError

    @abstractmethod
    def values(self) -> list[Document]:
        raise NotImplementedError

@dataclass
class MemoryStorage(DocumentStorage):
    _docs: dict[str, Document] = field(default_factory=dict)

    def get(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def put(self, doc: Document) -> None:
        self._docs[doc.id] = doc

    def values(self) -> list[Document]:
        return list(self._docs.values())

    def __len__(self) -> int:
        return len(self._docs)
