"""Root test configuration: shared document data files"""

import json

import pytest


SAMPLE_DOCUMENTS = [
    {
        "id": "d1",
        "title": "Hello",
        "content": "greetings from the first document",
        "author": {"id": "a1", "name": "Ada"},
        "created": "2024-01-01T00:00:00Z",
    },
    {
        "id": "d2",
        "title": "World",
        "content": "the second document",
        "author": {"id": "a2", "name": "Grace"},
        "created": "2024-06-01T00:00:00Z",
    },
    {
        "id": "d3",
        "title": "Help wanted",
        "content": "a third one, also by Ada",
        "author": {"id": "a1", "name": "Ada"},
        "created": "2024-12-01T00:00:00Z",
    },
]


@pytest.fixture(name="data_file")
def data_file_fixture(tmp_path):
    """A JSON documents file holding SAMPLE_DOCUMENTS."""
    path = tmp_path / "documents.json"
    path.write_text(json.dumps(SAMPLE_DOCUMENTS))
    return path
