"""Pydantic schemas for post resources."""
from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PostCreate(BaseModel):
    """Payload used by API clients when creating a post."""

    title: str | None = None
    content: str | None = None
    published: bool | None = None


class PostResponse(BaseModel):
    """Serialized representation of a persisted post."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: UUID
    title: str
    content: str | None = None
    published: bool = False
    author_id: UUID
    created_at: datetime


__all__ = ["PostCreate", "PostResponse"]
