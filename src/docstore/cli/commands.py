"""CLI command implementations"""

import json
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.crud.memory_repo import DocumentStore
from docstore.models import Document, SearchRequest
from docstore.util.fs import seed_store
from docstore.util.log import configure_logging


DataFileArg = Annotated[Optional[str], typer.Argument(help="YAML/JSON documents file (default: settings.data_file)")]

# %z accepts "Z" and "+HH:MM", the offsets search/get print.
DATETIME_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
]


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


def _load_store(data_file: str | None) -> DocumentStore:
    """Configure logging and seed a fresh store from the data file."""
    settings = _settings(overrides={"data_file": data_file})
    configure_logging(settings.log_level, settings.log_format)
    store = DocumentStore()
    try:
        seed_store(store, Path(settings.data_file))
    except ValueError as e:
        _fail("Could not load documents", e)
    return store


def _dump(docs: list[Document] | Document) -> str:
    if isinstance(docs, Document):
        return json.dumps(docs.model_dump(mode="json"), indent=2, ensure_ascii=False)
    return json.dumps([d.model_dump(mode="json") for d in docs], indent=2, ensure_ascii=False)


def search_cmd(
    data_file: DataFileArg = None,
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author_id: Annotated[Optional[list[str]], typer.Option("--author-id", help="Author id equals (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", formats=DATETIME_FORMATS, help="Created at or after")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", formats=DATETIME_FORMATS, help="Created at or before")] = None,
    ):
    """Load documents and print those matching all given filters as JSON."""
    store = _load_store(data_file)
    request = SearchRequest(
        title_prefixes=title_prefix,
        contains_contents=contains,
        author_ids=author_id,
        created_from=created_from,
        created_to=created_to,
    )
    typer.echo(_dump(store.search(request)))


def get_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    data_file: DataFileArg = None,
    ):
    """Load documents and print the one with the given id as JSON."""
    store = _load_store(data_file)
    doc = store.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"Document not found: {doc_id}", err=True)
        raise typer.Exit(1)
    typer.echo(_dump(doc))
