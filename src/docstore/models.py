"""Record types: authors, documents, and search requests"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes so stored and requested timestamps compare."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    id: str
    name: str


class Document(BaseModel):
    """A stored document. id and created are filled in by the store on first save."""
    model_config = ConfigDict(validate_assignment=True)

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class SearchRequest(BaseModel):
    """Search criteria. Absent or empty fields place no constraint on that dimension."""
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes: list[str] | None = Field(default=None, description="Title starts with any of these")
    contains_contents: list[str] | None = Field(default=None, description="Content contains any of these")
    author_ids: list[str] | None = Field(default=None, description="Author id is one of these")
    created_from: datetime | None = Field(default=None, description="Inclusive lower bound on created")
    created_to: datetime | None = Field(default=None, description="Inclusive upper bound on created")

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)
