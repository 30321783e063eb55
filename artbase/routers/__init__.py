"""Aggregate router exports."""
from .auth import router as auth_router
from .posts import router as posts_router
from .system import router as system_router

__all__ = ["auth_router", "posts_router", "system_router"]
