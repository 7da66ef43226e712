"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.crud.database import init_db, make_engine
from docstore.crud.manager import DocumentManager
from docstore.crud.models import Author, Document
from docstore.crud.sql_storage import SQLStorage
from docstore.crud.storage import MemoryStorage


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with all tables created."""
    engine = make_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="storage", params=["memory", "sql"])
def storage_fixture(request, engine):
    """Each storage backend in turn, empty."""
    if request.param == "memory":
        return MemoryStorage()
    return SQLStorage(engine)


@pytest.fixture(name="manager")
def manager_fixture(storage):
    """A DocumentManager over an empty storage backend."""
    return DocumentManager(storage)


@pytest.fixture(name="doc")
def doc_fixture():
    """A fully populated Document that has not been saved."""
    return Document(
        id="doc-1",
        title="Alpha report",
        content="Quarterly numbers for alpha",
        author=Author(id="a1", name="Ann"),
        created=datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc),
    )
