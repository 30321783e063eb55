"""HTTP client for the artbase API.

Wraps an injected :class:`httpx.Client` so the same code runs against a live
server or an in-process ``TestClient``.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import ArtbaseError, AuthError, ConflictError, FetchError, ServerError, ValidationError
from .models import RemotePost, Session, UserIdentity

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("error") or body.get("detail")
        if isinstance(message, str):
            return message
    return None


def error_from_response(response: httpx.Response) -> ArtbaseError:
    """Map an error response onto the client error taxonomy."""

    message = _error_message(response)
    code = response.status_code
    if code == httpx.codes.BAD_REQUEST or code == httpx.codes.UNPROCESSABLE_ENTITY:
        return ValidationError(message, status_code=code)
    if code in (httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN):
        return AuthError(message, status_code=code)
    if code == httpx.codes.CONFLICT:
        return ConflictError(message, status_code=code)
    if code >= 500:
        return ServerError(message, status_code=code)
    return FetchError(message, status_code=code)


class ArtbaseApiClient:
    """Session-aware access to signup, login and the post store."""

    def __init__(self, http: httpx.Client) -> None:
        self._http = http
        self._session: Session | None = None

    @property
    def session(self) -> Session | None:
        return self._session

    def current_user(self) -> UserIdentity | None:
        return self._session.user if self._session else None

    def _request(self, method: str, path: str, *, json: Any = None) -> httpx.Response:
        headers: dict[str, str] = {}
        if self._session is not None:
            headers["Authorization"] = f"Bearer {self._session.token}"
        try:
            response = self._http.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise FetchError() from exc
        if response.is_error:
            raise error_from_response(response)
        return response

    def sign_in(self, email: str, password: str) -> Session:
        response = self._request("POST", "/api/auth/login", json={"email": email, "password": password})
        payload = response.json()
        self._session = Session(token=payload["access_token"], user=UserIdentity.from_payload(payload["user"]))
        return self._session

    def sign_out(self) -> None:
        # Tokens are stateless; dropping the credential ends the session
        self._session = None

    def fetch_session(self) -> UserIdentity | None:
        """Ask the server which identity the held token resolves to."""

        payload = self._request("GET", "/api/auth/session").json()
        user = payload.get("user") if isinstance(payload, dict) else None
        if user is None:
            self._session = None
            return None
        return UserIdentity.from_payload(user)

    def signup(self, email: str, password: str, name: str | None = None) -> UserIdentity:
        response = self._request("POST", "/api/signup", json={"email": email, "password": password, "name": name})
        return UserIdentity.from_payload(response.json())

    def list_posts(self) -> list[RemotePost]:
        response = self._request("GET", "/api/posts")
        try:
            payload = response.json()
            if not isinstance(payload, list):
                return []
            return [RemotePost.from_payload(item) for item in payload]
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning("Unreadable post list from /api/posts: %s", exc)
            raise FetchError("Unreadable response from server", status_code=response.status_code) from exc

    def create_post(self, title: str, content: str | None = None, published: bool | None = None) -> RemotePost:
        body: dict[str, Any] = {"title": title}
        if content is not None:
            body["content"] = content
        if published is not None:
            body["published"] = published
        response = self._request("POST", "/api/posts", json=body)
        return RemotePost.from_payload(response.json())


__all__ = ["ArtbaseApiClient", "error_from_response"]
