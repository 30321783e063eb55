"""Per-post likes, comments and replies held for the length of a session."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, Mapping, Sequence

from .models import Comment

PostKey = Hashable


@dataclass(slots=True)
class EngagementEntry:
    """Optimistic engagement for one post.

    ``committed_likes`` is the last known like count; ``pending_delta`` holds
    the local, not yet reconciled adjustment.
    """

    post_id: PostKey
    committed_likes: int = 0
    pending_delta: int = 0
    liked: bool = False
    comments: list[Comment] = field(default_factory=list)
    replies: dict[int, list[Comment]] = field(default_factory=dict)

    @property
    def like_count(self) -> int:
        return self.committed_likes + self.pending_delta


class EngagementState:
    """Engagement entries keyed by post id, created lazily on first access."""

    def __init__(
        self,
        seed_likes: Mapping[PostKey, int] | None = None,
        seed_comments: Mapping[PostKey, Sequence[Comment]] | None = None,
    ) -> None:
        self._seed_likes = dict(seed_likes or {})
        self._seed_comments = {key: list(value) for key, value in (seed_comments or {}).items()}
        self._entries: dict[PostKey, EngagementEntry] = {}

    def entry(self, post_id: PostKey) -> EngagementEntry:
        existing = self._entries.get(post_id)
        if existing is None:
            existing = EngagementEntry(
                post_id=post_id,
                committed_likes=self._seed_likes.get(post_id, 0),
                comments=list(self._seed_comments.get(post_id, ())),
            )
            self._entries[post_id] = existing
        return existing

    def toggle_like(self, post_id: PostKey) -> tuple[bool, int]:
        """Flip the like flag and move the count relative to the pre-toggle flag."""

        entry = self.entry(post_id)
        entry.pending_delta += -1 if entry.liked else 1
        entry.liked = not entry.liked
        return entry.liked, entry.like_count

    def like_state(self, post_id: PostKey) -> tuple[bool, int]:
        entry = self.entry(post_id)
        return entry.liked, entry.like_count

    def comments(self, post_id: PostKey) -> list[Comment]:
        return list(self.entry(post_id).comments)

    def add_comment(self, post_id: PostKey, text: str) -> Comment | None:
        """Append a comment by the current user; blank text is ignored."""

        body = text.strip()
        if not body:
            return None
        comment = Comment(name="You", text=body, time="now")
        self.entry(post_id).comments.append(comment)
        return comment

    def replies(self, post_id: PostKey, comment_index: int) -> list[Comment]:
        return list(self.entry(post_id).replies.get(comment_index, ()))

    def add_reply(self, post_id: PostKey, comment_index: int, text: str) -> Comment | None:
        entry = self.entry(post_id)
        if not 0 <= comment_index < len(entry.comments):
            raise IndexError(f"post {post_id!r} has no comment at index {comment_index}")
        body = text.strip()
        if not body:
            return None
        reply = Comment(name="You", text=body, time="now")
        entry.replies.setdefault(comment_index, []).append(reply)
        return reply


def seeded_engagement(likes: Mapping[PostKey, int], posts: Iterable = ()) -> EngagementState:
    """Build engagement state seeded from sample like counts and comments."""

    return EngagementState(likes, {post.id: post.comments for post in posts if post.comments})


__all__ = ["EngagementEntry", "EngagementState", "seeded_engagement"]
