"""Signup and session API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import AuthResponse, LoginRequest, SessionResponse, SignupRequest, UserResponse
from ..services import authenticate_user, create_access_token, get_current_user, get_optional_user, signup_user

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup_endpoint(
    payload: SignupRequest,
    db: Session = Depends(get_session),
) -> UserResponse:
    user = signup_user(db, payload)
    return UserResponse.model_validate(user)


@router.post("/auth/login", response_model=AuthResponse)
async def login_endpoint(
    payload: LoginRequest,
    db: Session = Depends(get_session),
) -> AuthResponse:
    user = authenticate_user(db, payload.email, payload.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token(user.id)
    return AuthResponse(access_token=token, user=UserResponse.model_validate(user))


@router.get("/auth/session", response_model=SessionResponse)
async def session_endpoint(current_user: User | None = Depends(get_optional_user)) -> SessionResponse:
    """Report the identity bound to the bearer token, if any."""

    if current_user is None:
        return SessionResponse(user=None)
    return SessionResponse(user=UserResponse.model_validate(current_user))


@router.get("/auth/me", response_model=UserResponse)
async def me_endpoint(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)


__all__ = ["router"]
