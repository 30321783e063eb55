"""Business logic for posts stored in the relational post store."""
from __future__ import annotations

import logging
from typing import Sequence
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Post

logger = logging.getLogger(__name__)


def list_post_records(db: Session) -> Sequence[Post]:
    """Return every post, newest first."""

    stmt = select(Post).order_by(Post.created_at.desc(), Post.id.desc())
    return db.scalars(stmt).all()


def create_post_record(
    db: Session,
    *,
    author_id: UUID,
    title: str | None,
    content: str | None = None,
    published: bool | None = None,
) -> Post:
    """Create and persist a post owned by ``author_id``."""

    normalized_title = (title or "").strip()
    if not normalized_title:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="title required")

    post = Post(
        title=normalized_title,
        content=content,
        published=bool(published) if published is not None else False,
        author_id=author_id,
    )
    try:
        db.add(post)
        db.commit()
        db.refresh(post)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create post for %s", author_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Unable to create post") from exc
    return post


__all__ = ["create_post_record", "list_post_records"]
