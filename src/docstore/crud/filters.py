"""Search predicates: one per SearchRequest dimension, combined with AND"""

from datetime import datetime
from typing import Optional

from docstore.crud.models import Author, Document, SearchRequest


def matches_title_prefixes(title: Optional[str], prefixes: Optional[list[str]]) -> bool:
    """True if no prefixes are given or title starts with any of them. A None title never matches."""
    if not prefixes:
        return True
    if title is None:
        return False
    return any(title.startswith(p) for p in prefixes)


def matches_contains_contents(content: Optional[str], contains: Optional[list[str]]) -> bool:
    """True if no substrings are given or content contains any of them. None content never matches."""
    if not contains:
        return True
    if content is None:
        return False
    return any(s in content for s in contains)


def matches_author_ids(author: Optional[Author], author_ids: Optional[list[str]]) -> bool:
    """True if no ids are given or the document's author id is one of them."""
    if not author_ids:
        return True
    return author is not None and author.id is not None and author.id in author_ids


def matches_created(
    created: Optional[datetime],
    created_from: Optional[datetime],
    created_to: Optional[datetime],
    ) -> bool:
    """True if created lies within the inclusive bounds. A None created never matches, even unbounded."""
    if created is None:
        return False
    return (
        (created_from is None or created >= created_from)
        and (created_to is None or created <= created_to)
    )


def matches(doc: Document, request: SearchRequest) -> bool:
    return (
        matches_title_prefixes(doc.title, request.title_prefixes)
        and matches_contains_contents(doc.content, request.contains_contents)
        and matches_author_ids(doc.author, request.author_ids)
        and matches_created(doc.created, request.created_from, request.created_to)
    )
