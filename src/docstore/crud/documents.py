"""Document upsert merge: id generation and created-preserving replacement"""

from datetime import datetime, timezone
from uuid import uuid4

from docstore.crud.models import Document


def new_document_id() -> str:
    """Return a fresh random document id (UUID4 string)."""
    return str(uuid4())


def merge_document(
    existing: Document | None,
    incoming: Document,
    now: datetime | None = None,
    ) -> tuple[Document, str]:
    """Build the document to store for incoming, given what is stored under its id.

    Returns (doc, status) where status is 'created' or 'updated'.
    On update, id and created come from existing; title, content and author
    come from incoming. On create, created falls back to now (UTC) when
    incoming has none. incoming.id must already be set.
    Neither argument is modified; the result shares no objects with them.
    """
    author = incoming.author.model_copy(deep=True) if incoming.author is not None else None

    if existing is not None:
        return Document(
            id=existing.id,
            title=incoming.title,
            content=incoming.content,
            author=author,
            created=existing.created,
        ), 'updated'

    return Document(
        id=incoming.id,
        title=incoming.title,
        content=incoming.content,
        author=author,
        created=incoming.created if incoming.created is not None else (now or datetime.now(timezone.utc)),
    ), 'created'
