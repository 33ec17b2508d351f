"""In-memory DocumentRepo: a dict of documents keyed by id"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from docstore.crud.filters import matches
from docstore.crud.repo import DocumentRepo
from docstore.models import Document, SearchRequest
from docstore.util.log import get_logger


log = get_logger(__name__)


@dataclass
class DocumentStore(DocumentRepo):
    """Keeps documents for the lifetime of the instance. Not thread-safe.

    search() returns documents in the order their ids were first saved.
    """
    _docs: dict[str, Document] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def save(self, document: Document) -> Document:
        """Upsert document and return it.

        Assigns a UUID4 id when id is None or empty. On first insert, created
        defaults to now (UTC); on later saves the stored created always wins.
        Raises ValueError if document is None.
        """
        if document is None:
            raise ValueError("document is required")

        if not document.id:
            document.id = str(uuid4())

        existing = self._docs.get(document.id)
        if existing is not None:
            document.created = existing.created
        elif document.created is None:
            document.created = datetime.now(timezone.utc)

        log.debug("document_saved", id=document.id, created=document.created, inserted=existing is None)
        self._docs[document.id] = document
        return document

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return all documents matching every constraint set on request."""
        request = request or SearchRequest()
        results = [doc for doc in self._docs.values() if matches(doc, request)]
        log.debug("documents_searched", matched=len(results), total=len(self._docs))
        return results

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)
