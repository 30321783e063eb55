"""Pydantic schemas for signup and session endpoints."""
from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    """Signup payload. Required fields are checked by the handler so that a
    missing value maps to 400 rather than a schema validation error."""

    email: str | None = None
    password: str | None = None
    name: str | None = Field(default=None, max_length=150)


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    name: str | None = None


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class SessionResponse(BaseModel):
    user: UserResponse | None = None


__all__ = ["AuthResponse", "LoginRequest", "SessionResponse", "SignupRequest", "UserResponse"]
