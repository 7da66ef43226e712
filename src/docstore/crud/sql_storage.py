from __future__ import annotations
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from docstore.crud.models import Author, Document
from docstore.crud.sql_models import DocumentRow
from docstore.crud.storage import DocumentStorage

def _row_to_doc(r: DocumentRow) -> Document:
    return Document(
        id=r.id,
        title=r.title,
        content=r.content,
        author=Author(id=r.author_id, name=r.author_name) if r.has_author else None,
        created=r.created,
    )

def _doc_to_row(doc: Document, existing: DocumentRow | None) -> DocumentRow:
    row = existing or DocumentRow(id=doc.id)
    row.title = doc.title
    row.content = doc.content
    row.has_author = doc.author is not None
    row.author_id = doc.author.id if doc.author else None
    row.author_name = doc.author.name if doc.author else None
    row.created = doc.created
    return row

class SQLStorage(DocumentStorage):
    """DocumentStorage over the documents table; one short session per call."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def get(self, doc_id: str) -> Document | None:
        with Session(self.engine) as session:
            row = session.get(DocumentRow, doc_id)
            return _row_to_doc(row) if row else None

    def put(self, doc: Document) -> None:
        with Session(self.engine) as session:
            row = session.get(DocumentRow, doc.id)
            session.add(_doc_to_row(doc, existing=row))
            session.commit()

    def values(self) -> list[Document]:
        with Session(self.engine) as session:
            return [_row_to_doc(r) for r in session.exec(select(DocumentRow)).all()]
