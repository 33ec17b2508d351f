from __future__ import annotations
from pathlib import Path
import json
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from docstore.crud.repo import DocumentRepo
from docstore.models import Document
from docstore.util.log import get_logger

log = get_logger(__name__)

_documents = TypeAdapter(list[Document])

def _read(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    if path.suffix.lower() in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    raise ValueError(f"Unsupported data file type: {path.suffix or path.name}")

def load_documents(path: Path) -> list[Document]:
    """Parse a YAML/JSON list of documents. Raises ValueError on any read or validation failure."""
    try:
        raw = _read(path)
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid {path}: {e}") from e

    try:
        return _documents.validate_python(raw or [])
    except ValidationError as e:
        raise ValueError(f"Invalid documents in {path}: {e}") from e

def seed_store(repo: DocumentRepo, path: Path) -> list[Document]:
    """Save every document in path into repo, in file order. Returns the saved documents."""
    saved = [repo.save(doc) for doc in load_documents(path)]
    log.info("documents_loaded", path=str(path), count=len(saved))
    return saved
