"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.crud.memory_repo import DocumentStore
from docstore.models import Author, Document


T1 = datetime(2024, 1, 1, tzinfo=timezone.utc)
T2 = datetime(2024, 6, 1, tzinfo=timezone.utc)


@pytest.fixture(name="t1")
def t1_fixture():
    """created of D1 in the seeded store."""
    return T1


@pytest.fixture(name="t2")
def t2_fixture():
    """created of D2 in the seeded store."""
    return T2


@pytest.fixture(name="store")
def store_fixture():
    """Empty in-memory store."""
    return DocumentStore()


@pytest.fixture(name="ada")
def ada_fixture():
    return Author(id="a1", name="Ada")


@pytest.fixture(name="grace")
def grace_fixture():
    return Author(id="a2", name="Grace")


@pytest.fixture(name="seeded")
def seeded_fixture(store, ada, grace):
    """Store holding D1 (Hello/Ada/T1) and D2 (World/Grace/T2)."""
    store.save(Document(id="d1", title="Hello", content="first body", author=ada, created=T1))
    store.save(Document(id="d2", title="World", content="second body", author=grace, created=T2))
    return store
