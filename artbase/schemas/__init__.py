"""Convenience exports for schema layer."""
from .auth import AuthResponse, LoginRequest, SessionResponse, SignupRequest, UserResponse
from .posts import PostCreate, PostResponse
from .system import DbHealthResponse

__all__ = [
    "AuthResponse",
    "DbHealthResponse",
    "LoginRequest",
    "PostCreate",
    "PostResponse",
    "SessionResponse",
    "SignupRequest",
    "UserResponse",
]
