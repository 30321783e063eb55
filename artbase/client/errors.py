"""Client-side error taxonomy.

Every error carries a ``message`` suitable for showing to the user as-is.
"""
from __future__ import annotations


class ArtbaseError(Exception):
    """Base class for failures surfaced by the client state model."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        self.status_code = status_code
        super().__init__(self.message)


class AuthError(ArtbaseError):
    """Invalid credentials or a missing session."""

    default_message = "Unauthorized"


class ValidationError(ArtbaseError):
    """A required field is missing or inconsistent; raised before any network call where possible."""

    default_message = "Invalid input"


class ConflictError(ArtbaseError):
    """The server refused a create because the resource already exists."""

    default_message = "Email already in use"


class FetchError(ArtbaseError):
    """Network or transport failure while talking to the API."""

    default_message = "Network request failed"


class ServerError(ArtbaseError):
    """Unexpected persistence failure reported by the server."""

    default_message = "Server error"


__all__ = ["ArtbaseError", "AuthError", "ConflictError", "FetchError", "ServerError", "ValidationError"]
