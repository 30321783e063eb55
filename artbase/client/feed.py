"""Client post cache: local uploads reconciled with the remote post store."""
from __future__ import annotations

import dataclasses
import logging
import time
from typing import Any, Callable, Iterable, Mapping

from .api import ArtbaseApiClient
from .errors import ArtbaseError, AuthError, ValidationError
from .models import FeedEntry, LocalPost, RemotePost
from .screens import parse_tags

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"image_title", "stone_type", "story", "description", "tags"})
# Never changed by an edit
_PROTECTED_FIELDS = frozenset({"id", "time_ago", "is_uploaded"})


class ClientPostCache:
    """Merged feed of session-local uploads and server-backed posts.

    Local posts carry integer ids taken from a monotonic millisecond clock;
    remote posts carry the store's string ids, so the two never collide.
    Only local posts are editable or deletable.
    """

    def __init__(self, api: ArtbaseApiClient, *, clock: Callable[[], float] = time.time) -> None:
        self._api = api
        self._clock = clock
        self._local: list[LocalPost] = []
        self._remote: list[RemotePost] = []
        self._generation = 0
        self._last_local_id = 0
        self.loading = False

    @property
    def local_posts(self) -> list[LocalPost]:
        return list(self._local)

    @property
    def remote_posts(self) -> list[RemotePost]:
        return list(self._remote)

    @property
    def status(self) -> str:
        """``loading``, ``empty`` or ``ready`` for the server-backed slice."""

        if self.loading:
            return "loading"
        return "ready" if self._remote else "empty"

    def merged_feed(self) -> list[FeedEntry]:
        return [*self._local, *self._remote]

    def next_local_id(self) -> int:
        candidate = int(self._clock() * 1000)
        self._last_local_id = max(candidate, self._last_local_id + 1)
        return self._last_local_id

    def find(self, post_id: int | str) -> FeedEntry | None:
        for entry in self.merged_feed():
            if entry.id == post_id:
                return entry
        return None

    def is_editable(self, post_id: int | str) -> bool:
        return self._local_index(post_id) is not None

    def _local_index(self, post_id: int | str) -> int | None:
        for index, post in enumerate(self._local):
            if post.id == post_id:
                return index
        return None

    def append(self, post: LocalPost) -> None:
        """Insert a local upload at the head of the feed."""

        if self._local_index(post.id) is not None:
            raise ValueError(f"local post {post.id} already exists")
        self._local.insert(0, post)

    def update(self, post_id: int | str, patch: Mapping[str, Any]) -> LocalPost | None:
        """Apply ``patch`` to a local post; a no-op for anything else."""

        index = self._local_index(post_id)
        if index is None:
            return None

        changes: dict[str, Any] = {}
        for key, value in patch.items():
            if key == "title":
                key = "image_title"
            if key in _PROTECTED_FIELDS:
                continue
            if key not in EDITABLE_FIELDS:
                raise ValueError(f"{key!r} is not an editable post field")
            if key == "tags":
                value = tuple(parse_tags(value) if isinstance(value, str) else value)
            changes[key] = value

        updated = dataclasses.replace(self._local[index], **changes)
        self._local[index] = updated
        return updated

    def remove(self, post_id: int | str) -> bool:
        index = self._local_index(post_id)
        if index is None:
            return False
        del self._local[index]
        return True

    def begin_refresh(self) -> int:
        """Start a refresh and return its generation token."""

        self._generation += 1
        self.loading = True
        return self._generation

    def complete_refresh(self, generation: int, posts: Iterable[RemotePost]) -> bool:
        """Apply a fetched list unless a newer refresh or invalidation superseded it."""

        if generation != self._generation:
            logger.debug("Discarding stale feed response (generation %d, current %d)", generation, self._generation)
            return False
        self._remote = list(posts)
        self.loading = False
        return True

    def invalidate(self) -> None:
        """Make every in-flight refresh stale."""

        self._generation += 1
        self.loading = False

    def refresh(self) -> list[RemotePost]:
        """Replace the server-backed slice. Failures degrade to an empty list."""

        generation = self.begin_refresh()
        posts: list[RemotePost] = []
        try:
            posts = self._api.list_posts()
        except ArtbaseError as exc:
            logger.warning("Feed refresh failed: %s", exc.message)
        finally:
            self.complete_refresh(generation, posts)
        return self.remote_posts

    def publish(self, title: str, content: str | None = None) -> RemotePost:
        """Create a text post in the store, then reload the remote slice."""

        normalized = title.strip()
        if not normalized:
            raise ValidationError("title required")
        if self._api.current_user() is None:
            raise AuthError("Please sign in to post")
        post = self._api.create_post(normalized, content)
        self.refresh()
        return post

    def clear(self) -> None:
        self.invalidate()
        self._local.clear()
        self._remote.clear()


__all__ = ["ClientPostCache", "EDITABLE_FIELDS"]
