"""Search predicates: one per SearchRequest dimension, combined by matches()"""

from datetime import datetime

from docstore.models import Document, SearchRequest


def match_title(doc: Document, prefixes: list[str] | None) -> bool:
    """True if no prefixes are given or the title starts with any of them."""
    if not prefixes:
        return True
    return doc.title is not None and doc.title.startswith(tuple(prefixes))


def match_content(doc: Document, contents: list[str] | None) -> bool:
    """True if no substrings are given or the content contains any of them."""
    if not contents:
        return True
    return doc.content is not None and any(c in doc.content for c in contents)


def match_author(doc: Document, author_ids: list[str] | None) -> bool:
    if not author_ids:
        return True
    return doc.author is not None and doc.author.id in author_ids


def match_created(doc: Document, created_from: datetime | None, created_to: datetime | None) -> bool:
    """Inclusive range check on doc.created. Either bound may be None."""
    if created_from is not None and doc.created < created_from:
        return False
    if created_to is not None and doc.created > created_to:
        return False
    return True


def matches(doc: Document, request: SearchRequest) -> bool:
    """Conjunction of all dimension predicates for request."""
    return (
        match_title(doc, request.title_prefixes)
        and match_content(doc, request.contains_contents)
        and match_author(doc, request.author_ids)
        and match_created(doc, request.created_from, request.created_to)
    )
