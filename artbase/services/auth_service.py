"""Business logic for signup and bearer sessions backed by the post store."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import MissingSecretError, get_settings
from ..database import get_session
from ..models import User
from ..schemas import SignupRequest

logger = logging.getLogger(__name__)

_security = HTTPBearer(auto_error=False)
_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

EMAIL_IN_USE_DETAIL = "Email already in use"


def _get_jwt_secret() -> str:
    try:
        return get_settings().require_jwt_secret()
    except MissingSecretError as exc:
        raise RuntimeError(str(exc)) from exc


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address before lookups and storage."""

    return email.strip().lower()


def hash_password(password: str) -> str:
    """Hash a plain-text password using bcrypt."""

    return _pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    """Verify that ``password`` matches ``hashed_password``."""

    try:
        return _pwd_context.verify(password, hashed_password)
    except ValueError:
        logger.warning("Stored password hash could not be parsed")
        return False


def create_access_token(subject: UUID, *, expires_minutes: Optional[int] = None) -> str:
    """Create a signed JWT holding the provided ``subject``."""

    settings = get_settings()
    expire_delta = timedelta(minutes=expires_minutes or settings.jwt_expires_minutes)
    now = datetime.now(timezone.utc)
    payload = {"sub": str(subject), "exp": now + expire_delta, "iat": now}
    return jwt.encode(payload, _get_jwt_secret(), algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> UUID:
    """Decode and validate a JWT, returning the embedded subject UUID."""

    try:
        payload = jwt.decode(token, _get_jwt_secret(), algorithms=[get_settings().jwt_algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized") from exc

    subject = payload.get("sub")
    if not subject:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    try:
        return UUID(subject)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized") from exc


def signup_user(db: Session, payload: SignupRequest) -> User:
    """Persist a new user. The raw password is hashed and never stored."""

    if not payload.email or not payload.email.strip() or not payload.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email and password required")

    email = normalize_email(payload.email)
    existing = db.scalar(select(User).where(User.email == email))
    if existing:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=EMAIL_IN_USE_DETAIL)

    user = User(email=email, name=payload.name or None, hashed_password=hash_password(payload.password))

    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError as exc:
        # A concurrent signup won the unique index on users.email
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=EMAIL_IN_USE_DETAIL) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to register user")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Signup failed") from exc

    logger.info("Registered user %s", user.id)
    return user


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Return the user matching the credentials, or ``None``."""

    user = db.scalar(select(User).where(User.email == normalize_email(email)))
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(_security),
    db: Session = Depends(get_session),
) -> User:
    """Resolve the authenticated user from the provided bearer token."""

    if not credentials or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    user_id = decode_access_token(credentials.credentials)

    user = db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user


async def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    db: Session = Depends(get_session),
) -> User | None:
    """Return the authenticated user when a valid bearer token is provided."""

    if not credentials or credentials.scheme.lower() != "bearer":
        return None

    try:
        user_id = decode_access_token(credentials.credentials)
    except HTTPException:
        return None

    return db.get(User, user_id)


__all__ = [
    "EMAIL_IN_USE_DETAIL",
    "authenticate_user",
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "get_optional_user",
    "hash_password",
    "normalize_email",
    "signup_user",
    "verify_password",
]
