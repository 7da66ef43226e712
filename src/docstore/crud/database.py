"""Engine creation, table setup, and storage selection from a URL"""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from docstore.crud.sql_storage import SQLStorage
from docstore.crud.storage import DocumentStorage, MemoryStorage


logger = logging.getLogger(__name__)

MEMORY_URL = "memory"
_SQLITE_IN_PROCESS = {"sqlite://", "sqlite:///:memory:"}


def make_engine(db_url: str) -> Engine:
    """Create an engine; in-process SQLite shares one connection so the data outlives each session."""
    if db_url in _SQLITE_IN_PROCESS:
        return create_engine(db_url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    return create_engine(db_url, echo=False)


def init_db(engine: Engine) -> None:
    """Create all tables if they don't exist."""
    SQLModel.metadata.create_all(engine)


def make_storage(url: str = MEMORY_URL) -> DocumentStorage:
    """Return MemoryStorage for 'memory', otherwise SQLStorage on a fresh engine for url."""
    if url == MEMORY_URL:
        logger.info("Using in-memory document storage")
        return MemoryStorage()
    engine = make_engine(url)
    init_db(engine)
    logger.info("Using SQL document storage at %s", engine.url.render_as_string(hide_password=True))
    return SQLStorage(engine)
