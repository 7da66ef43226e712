"""DocumentManager: upsert, point lookup, and filtered scan over a DocumentStorage"""

import logging
import threading

from docstore.crud.documents import merge_document, new_document_id
from docstore.crud.filters import matches
from docstore.crud.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo
from docstore.crud.storage import DocumentStorage, MemoryStorage
from docstore.errors import InvalidArgumentError


logger = logging.getLogger(__name__)


def _snapshot(doc: Document) -> Document:
    return doc.model_copy(deep=True)


class DocumentManager(DocumentRepo):
    """The document repository.

    Callers only ever see deep copies of stored documents. A re-entrant lock
    serializes every storage access (the read-merge-write of save, the
    lookup of find_by_id and the scan of search), so the manager can be
    shared between threads even when storage sits on one shared connection.
    """

    def __init__(self, storage: DocumentStorage | None = None):
        self.storage = storage if storage is not None else MemoryStorage()
        self._lock = threading.RLock()

    def upsert(self, doc: Document) -> tuple[Document, str]:
        """Save doc and return (stored_doc, status), status being 'created' or 'updated'.

        Raises InvalidArgumentError if doc is None. doc itself is not modified;
        a generated id is only visible on the returned document.
        """
        if doc is None:
            raise InvalidArgumentError("Document cannot be None")

        if not doc.id:
            doc = doc.model_copy(update={"id": new_document_id()})

        with self._lock:
            existing = self.storage.get(doc.id)
            merged, status = merge_document(existing, doc)
            self.storage.put(merged)

        logger.debug("%s document %s", status.capitalize(), merged.id)
        return _snapshot(merged), status

    def save(self, doc: Document) -> Document:
        saved, _ = self.upsert(doc)
        return saved

    def find_by_id(self, doc_id: str | None) -> Document | None:
        if not doc_id:
            return None
        with self._lock:
            doc = self.storage.get(doc_id)
        return _snapshot(doc) if doc is not None else None

    def search(self, request: SearchRequest | None) -> list[Document]:
        """Full scan keeping documents that pass all four predicates.

        A None request is the same as SearchRequest(): every document that
        has a created timestamp. Result order is unspecified.
        """
        request = request or SearchRequest()
        with self._lock:
            docs = self.storage.values()
        results = [_snapshot(d) for d in docs if matches(d, request)]
        logger.debug("Search matched %d of %d documents", len(results), len(docs))
        return results
