"""Repository data models: documents, authors, and search criteria"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return value as an aware UTC datetime; naive values are taken to be UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Author(BaseModel):
    """Who wrote a document. Either field may be absent."""
    id: Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):
    """A stored document keyed by id; created is fixed at first insertion."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def _created_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class SearchRequest(BaseModel):
    """Search criteria, each one optional.

    None (absent) and [] (present but empty) are kept distinct on the model
    but both mean "no constraint" for that dimension. The created bounds are
    inclusive.
    """
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None
    created_to:        Optional[datetime] = None

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)
