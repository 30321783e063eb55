"""Post listing and creation routes."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import PostCreate, PostResponse
from ..services import create_post_record, get_current_user, list_post_records

router = APIRouter(prefix="/api/posts", tags=["posts"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[PostResponse])
async def list_posts_endpoint(db: Session = Depends(get_session)) -> list[PostResponse]:
    return [PostResponse.model_validate(post) for post in list_post_records(db)]


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post_endpoint(
    payload: PostCreate,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> PostResponse:
    """Create a post authored by the session user.

    The author is always taken from the bearer session, never from the body.
    """

    post = create_post_record(
        db,
        author_id=current_user.id,
        title=payload.title,
        content=payload.content,
        published=payload.published,
    )
    logger.info("Post %s created by %s", post.id, current_user.id)
    return PostResponse.model_validate(post)


__all__ = ["router"]
