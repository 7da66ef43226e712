"""Unit tests for crud/models.py"""

from datetime import datetime, timedelta, timezone

from docstore.crud.models import Document, SearchRequest, as_utc


def test_as_utc_naive_is_utc():
    """A naive datetime is read as UTC."""
    assert as_utc(datetime(2024, 1, 1, 12)) == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)


def test_as_utc_converts_offsets():
    """An aware datetime is converted to the same instant in UTC."""
    plus_two = timezone(timedelta(hours=2))
    result = as_utc(datetime(2024, 1, 1, 12, tzinfo=plus_two))
    assert result.tzinfo == timezone.utc
    assert result.hour == 10


def test_document_created_normalized():
    doc = Document(created=datetime(2024, 1, 1))
    assert doc.created.tzinfo == timezone.utc


def test_document_parses_iso_strings():
    """Records from JSON/YAML validate into nested models."""
    doc = Document.model_validate({
        "id": "x",
        "author": {"id": "a1", "name": "Ann"},
        "created": "2024-01-01T00:00:00Z",
    })
    assert doc.author.name == "Ann"
    assert doc.created == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_search_request_absent_vs_empty():
    """None and [] stay distinct on the model."""
    assert SearchRequest().title_prefixes is None
    assert SearchRequest(title_prefixes=[]).title_prefixes == []


def test_search_request_bounds_normalized():
    request = SearchRequest(created_from=datetime(2024, 1, 1), created_to=None)
    assert request.created_from.tzinfo == timezone.utc
    assert request.created_to is None


def test_assignment_normalizes_timestamps():
    """Timestamps assigned after construction go through the same UTC conversion."""
    doc = Document()
    doc.created = datetime(2024, 1, 1)
    request = SearchRequest()
    request.created_to = datetime(2024, 1, 1, 14, tzinfo=timezone(timedelta(hours=2)))
    assert doc.created.tzinfo == timezone.utc
    assert request.created_to == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
    assert request.created_to.tzinfo == timezone.utc
