"""Document batch files: read YAML/JSON records and load them into a repository"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from docstore.crud.manager import DocumentManager
from docstore.crud.models import Document


def read_documents(path: Path) -> list[Document]:
    """Parse a YAML or JSON file into Documents.

    The file holds either a list of document mappings or a mapping with a
    'documents' list. Raises ValueError for unreadable or invalid content.
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("documents")
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path}: expected a list of documents")

    try:
        return [Document.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path}: {e}") from e


def run_load(
    manager: DocumentManager,
    docs: list[Document],
    ) -> tuple[dict[str, int], list[tuple[str, Document]]]:
    """Save docs in order.

    Returns (counts, changes) where counts tallies 'created'/'updated' and
    changes holds (status, stored_doc) per input document.
    """
    counts = {"created": 0, "updated": 0}
    changes = []
    for doc in docs:
        stored, status = manager.upsert(doc)
        counts[status] += 1
        changes.append((status, stored))
    return counts, changes
