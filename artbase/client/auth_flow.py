"""Login, signup and logout on top of the API client's session handling."""
from __future__ import annotations

import logging

from .api import ArtbaseApiClient
from .errors import AuthError, ValidationError
from .navigator import Screen, ScreenNavigator

logger = logging.getLogger(__name__)


class AuthFlow:
    """Holds the credential form fields and drives the auth screens."""

    def __init__(self, api: ArtbaseApiClient, navigator: ScreenNavigator) -> None:
        self._api = api
        self._navigator = navigator
        self.email = ""
        self.username = ""
        self.password = ""
        self.confirm_password = ""

    @property
    def is_authenticated(self) -> bool:
        return self._api.current_user() is not None

    def login(self, identifier: str, secret: str) -> None:
        if not identifier or not secret:
            raise ValidationError("Please enter both email and password")
        try:
            self._api.sign_in(identifier, secret)
        except AuthError as exc:
            raise AuthError("Invalid credentials", status_code=exc.status_code) from exc
        self._navigator.reset(Screen.HOME)

    def signup(self, email: str, identifier: str, secret: str, confirm_secret: str) -> None:
        """Create an account, then sign straight into it."""

        if not email or not identifier or not secret or not confirm_secret:
            raise ValidationError("Please fill in all fields")
        if secret != confirm_secret:
            raise ValidationError("Passwords do not match!")

        # ConflictError carries the server's "Email already in use"
        self._api.signup(email, secret, name=identifier)

        try:
            self._api.sign_in(email, secret)
        except AuthError as exc:
            raise AuthError("Sign-in failed", status_code=exc.status_code) from exc
        logger.info("Signed up and signed in as %s", email)
        self._navigator.reset(Screen.HOME)

    def logout(self) -> None:
        self._api.sign_out()
        self.email = ""
        self.username = ""
        self.password = ""
        self.confirm_password = ""
        self._navigator.reset(Screen.LOGIN)

    def submit_login(self) -> None:
        """Log in with the values currently held in the form fields."""

        self.login(self.username, self.password)

    def submit_signup(self) -> None:
        self.signup(self.email, self.username, self.password, self.confirm_password)


__all__ = ["AuthFlow"]
