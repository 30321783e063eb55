"""Client-side state model: navigation, feed cache, engagement and auth flow."""
from .api import ArtbaseApiClient
from .app import ArtbaseApp
from .auth_flow import AuthFlow
from .engagement import EngagementEntry, EngagementState
from .errors import ArtbaseError, AuthError, ConflictError, FetchError, ServerError, ValidationError
from .feed import ClientPostCache
from .models import Comment, LocalPost, RemotePost, SamplePost, Service, Session, UserIdentity
from .navigator import NavEntry, Screen, ScreenNavigator

__all__ = [
    "ArtbaseApiClient",
    "ArtbaseApp",
    "ArtbaseError",
    "AuthError",
    "AuthFlow",
    "ClientPostCache",
    "Comment",
    "ConflictError",
    "EngagementEntry",
    "EngagementState",
    "FetchError",
    "LocalPost",
    "NavEntry",
    "RemotePost",
    "SamplePost",
    "Screen",
    "ScreenNavigator",
    "ServerError",
    "Service",
    "Session",
    "UserIdentity",
    "ValidationError",
]
