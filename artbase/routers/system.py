"""System-level routes for diagnostics."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import database_time, get_session
from ..schemas import DbHealthResponse

router = APIRouter(prefix="/api", tags=["system"])

logger = logging.getLogger(__name__)


@router.get("/db-health", response_model=DbHealthResponse)
def db_health(db: Session = Depends(get_session)) -> DbHealthResponse:
    """Round-trip to the database and report its clock."""

    try:
        now = database_time(db)
    except SQLAlchemyError as exc:
        logger.exception("Database health probe failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Database unavailable") from exc
    return DbHealthResponse(status="ok", db_time=now)


__all__ = ["router"]
