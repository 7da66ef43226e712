"""CLI command implementations"""

import json
from datetime import datetime
from pathlib import Path
from typing import Annotated, List, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.pipeline import read_documents, run_load
from docstore.crud.database import make_storage
from docstore.crud.manager import DocumentManager
from docstore.crud.models import Document, SearchRequest
from docstore.logger_config import configure_logging


FileArg = Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="YAML or JSON document file")]
StorageOpt = Annotated[Optional[str], typer.Option("--storage-url", help="'memory' or a SQLAlchemy URL")]
LogLevelOpt = Annotated[Optional[str], typer.Option("--log-level", help="Logging level for docstore loggers")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _seeded(path: Path, storage_url: Optional[str], log_level: Optional[str]) -> tuple[DocumentManager, dict, list]:
    """Build a repository from settings and load every document in path into it."""
    settings = _settings(overrides={"storage_url": storage_url, "log_level": log_level})
    configure_logging(settings.log_level)
    try:
        docs = read_documents(path)
    except ValueError as e:
        _fail(str(e))
    manager = DocumentManager(make_storage(settings.storage_url))
    counts, changes = run_load(manager, docs)
    return manager, counts, changes


def _echo_json(payload) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _dump(doc: Document) -> dict:
    return doc.model_dump(mode="json")


def load_cmd(path: FileArg, storage_url: StorageOpt = None, log_level: LogLevelOpt = None):
    """Save every document in a file and report what was created or updated."""
    _, counts, changes = _seeded(path, storage_url, log_level)
    for status, doc in changes:
        typer.echo(f"  {status}: {doc.id}")
    typer.echo(f"Load complete - {counts['created']} created, {counts['updated']} updated")


def get_cmd(
    path: FileArg,
    doc_id: Annotated[str, typer.Argument(help="Document id to look up")],
    storage_url: StorageOpt = None,
    log_level: LogLevelOpt = None,
    ):
    """Print one document as JSON after loading the file."""
    manager, _, _ = _seeded(path, storage_url, log_level)
    doc = manager.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"Document not found: {doc_id}", err=True)
        raise typer.Exit(1)
    _echo_json(_dump(doc))


def search_cmd(
    path: FileArg,
    title_prefix: Annotated[Optional[List[str]], typer.Option("--title-prefix", help="Title starts with (repeatable, OR)")] = None,
    contains: Annotated[Optional[List[str]], typer.Option("--contains", help="Content contains (repeatable, OR)")] = None,
    author: Annotated[Optional[List[str]], typer.Option("--author", help="Author id (repeatable, OR)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", help="Inclusive lower bound (UTC)")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", help="Inclusive upper bound (UTC)")] = None,
    storage_url: StorageOpt = None,
    log_level: LogLevelOpt = None,
    ):
    """Print the documents matching every given filter as a JSON list."""
    manager, _, _ = _seeded(path, storage_url, log_level)
    request = SearchRequest(
        title_prefixes=title_prefix,
        contains_contents=contains,
        author_ids=author,
        created_from=created_from,
        created_to=created_to,
    )
    _echo_json([_dump(d) for d in manager.search(request)])
