"""In-memory document store with upsert and multi-criteria search"""

from docstore.crud.memory_repo import DocumentStore
from docstore.models import Author, Document, SearchRequest

__all__ = ["Author", "Document", "DocumentStore", "SearchRequest"]
