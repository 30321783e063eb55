"""Plain data types shared by the client state model."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Union


@dataclass(frozen=True, slots=True)
class UserIdentity:
    id: str
    email: str
    name: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "UserIdentity":
        return cls(id=str(payload["id"]), email=str(payload["email"]), name=payload.get("name"))


@dataclass(frozen=True, slots=True)
class Session:
    """A bearer credential bound to one identity."""

    token: str
    user: UserIdentity


@dataclass(frozen=True, slots=True)
class RemotePost:
    """A post fetched from the post store. Never editable from the client."""

    id: str
    title: str
    author_id: str
    content: str | None = None
    published: bool = False
    created_at: datetime | None = None

    is_uploaded = False

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RemotePost":
        created_at = payload.get("createdAt")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
        return cls(
            id=str(payload["id"]),
            title=str(payload.get("title") or ""),
            author_id=str(payload.get("authorId") or ""),
            content=payload.get("content"),
            published=bool(payload.get("published", False)),
            created_at=created_at,
        )


@dataclass(frozen=True, slots=True)
class LocalPost:
    """A post uploaded in this session and held only on the client."""

    id: int
    sculptor_name: str
    username: str
    image_title: str
    stone_type: str
    story: str
    description: str = ""
    tags: tuple[str, ...] = ()
    time_ago: str = "just now"
    phone: str | None = None
    file_name: str | None = None

    is_uploaded = True

    @property
    def title(self) -> str:
        return self.image_title


@dataclass(frozen=True, slots=True)
class Comment:
    name: str
    text: str
    time: str
    tip: str | None = None


@dataclass(frozen=True, slots=True)
class SamplePost:
    """Seeded demo content shown alongside real posts."""

    id: int
    feed: str
    author: str
    username: str
    time_ago: str
    title: str
    description: str
    comments: tuple[Comment, ...] = field(default=())

    is_uploaded = False


@dataclass(frozen=True, slots=True)
class Service:
    name: str
    price: str
    description: str = ""


FeedEntry = Union[LocalPost, RemotePost]
AnyPost = Union[LocalPost, RemotePost, SamplePost]


__all__ = [
    "AnyPost",
    "Comment",
    "FeedEntry",
    "LocalPost",
    "RemotePost",
    "SamplePost",
    "Service",
    "Session",
    "UserIdentity",
]
