"""Screen navigation with an explicit back stack and per-screen payloads.

Each history entry carries only the context its screen needs, so returning to
an earlier screen restores exactly what it was showing. Screens other than
``login`` and ``signup`` are unreachable without an authenticated session.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, TypeVar, Union

from .models import AnyPost, Service

logger = logging.getLogger(__name__)


class Screen(StrEnum):
    HOME = "home"
    PROFILE = "profile"
    SERVICES = "services"
    PHOTO = "photo"
    UPLOAD = "upload"
    LOGIN = "login"
    SIGNUP = "signup"
    MESSAGES = "messages"
    TIP = "tip"
    SHARE = "share"
    SERVICE_DETAIL = "serviceDetail"
    PHOTO_FULL = "photoFull"
    BOOK = "book"
    EDIT_PROFILE = "editProfile"
    SETTINGS = "settings"
    COMMENTS = "comments"
    TIP_HISTORY = "tipHistory"


AUTH_SCREENS = frozenset({Screen.LOGIN, Screen.SIGNUP})
TAB_SCREENS = frozenset({Screen.HOME, Screen.PROFILE, Screen.UPLOAD, Screen.SERVICES, Screen.PHOTO})
DETAIL_SCREENS = frozenset(
    {
        Screen.MESSAGES,
        Screen.TIP,
        Screen.SHARE,
        Screen.COMMENTS,
        Screen.SETTINGS,
        Screen.SERVICE_DETAIL,
        Screen.PHOTO_FULL,
        Screen.BOOK,
    }
)

# Where "back" leads when there is no history to pop
_FALLBACK_PARENT: dict[Screen, Screen] = {
    Screen.SERVICE_DETAIL: Screen.SERVICES,
    Screen.BOOK: Screen.SERVICE_DETAIL,
    Screen.PHOTO_FULL: Screen.PHOTO,
    Screen.TIP_HISTORY: Screen.PROFILE,
    Screen.EDIT_PROFILE: Screen.PROFILE,
    Screen.SETTINGS: Screen.PROFILE,
}


@dataclass(frozen=True, slots=True)
class TipContext:
    post_id: int | str | None


@dataclass(frozen=True, slots=True)
class ShareContext:
    post_id: int | str | None


@dataclass(frozen=True, slots=True)
class CommentsContext:
    post: AnyPost


@dataclass(frozen=True, slots=True)
class PhotoContext:
    post: AnyPost


@dataclass(frozen=True, slots=True)
class ServiceContext:
    service: Service


@dataclass(frozen=True, slots=True)
class BookingContext:
    service: Service


ScreenContext = Union[TipContext, ShareContext, CommentsContext, PhotoContext, ServiceContext, BookingContext]

_CONTEXT_TYPES: dict[Screen, type] = {
    Screen.TIP: TipContext,
    Screen.SHARE: ShareContext,
    Screen.COMMENTS: CommentsContext,
    Screen.PHOTO_FULL: PhotoContext,
    Screen.SERVICE_DETAIL: ServiceContext,
    Screen.BOOK: BookingContext,
}

C = TypeVar("C")


@dataclass(frozen=True, slots=True)
class NavEntry:
    screen: Screen
    context: ScreenContext | None = None


def coerce_screen(value: Screen | str) -> Screen:
    """Resolve a screen name, falling back to ``home`` for unknown targets."""

    try:
        return Screen(value)
    except ValueError:
        logger.debug("Unknown screen %r, falling back to home", value)
        return Screen.HOME


class ScreenNavigator:
    """Finite-state router for the client's screens."""

    def __init__(self, is_authenticated: Callable[[], bool]) -> None:
        self._is_authenticated = is_authenticated
        initial = Screen.HOME if is_authenticated() else Screen.LOGIN
        self._current = NavEntry(initial)
        self._stack: list[NavEntry] = []

    @property
    def current(self) -> NavEntry:
        """The entry that should be rendered, after applying the auth gate."""

        if self._is_authenticated():
            return self._current
        if self._current.screen == Screen.SIGNUP:
            return self._current
        return NavEntry(Screen.LOGIN)

    @property
    def screen(self) -> Screen:
        return self.current.screen

    @property
    def context(self) -> ScreenContext | None:
        return self.current.context

    @property
    def history(self) -> tuple[Screen, ...]:
        return tuple(entry.screen for entry in self._stack)

    def context_as(self, kind: type[C]) -> C | None:
        context = self.context
        return context if isinstance(context, kind) else None

    def navigate(self, target: Screen | str, context: ScreenContext | None = None) -> Screen:
        """Move to ``target`` and return the screen that is now rendered."""

        screen = coerce_screen(target)
        expected = _CONTEXT_TYPES.get(screen)
        if context is not None and (expected is None or not isinstance(context, expected)):
            raise TypeError(f"{type(context).__name__} is not a valid payload for screen {screen}")

        if screen not in AUTH_SCREENS and not self._is_authenticated():
            return self.reset(Screen.LOGIN)

        entry = NavEntry(screen, context)
        if screen in DETAIL_SCREENS:
            if self._current != entry:
                self._stack.append(self._current)
        elif screen in TAB_SCREENS or screen in AUTH_SCREENS:
            self._stack.clear()
        self._current = entry
        return self.screen

    def go_back(self) -> Screen:
        """Return to the screen that opened the current one."""

        if self._current.screen in DETAIL_SCREENS and self._stack:
            self._current = self._stack.pop()
            return self.screen

        parent = _FALLBACK_PARENT.get(self._current.screen, Screen.HOME)
        if parent in TAB_SCREENS:
            self._stack.clear()
        context: ScreenContext | None = None
        if parent == Screen.SERVICE_DETAIL and isinstance(self._current.context, BookingContext):
            context = ServiceContext(self._current.context.service)
        self._current = NavEntry(parent, context)
        return self.screen

    def reset(self, screen: Screen | str) -> Screen:
        """Drop all history and land on ``screen``."""

        self._stack.clear()
        self._current = NavEntry(coerce_screen(screen))
        return self.screen


__all__ = [
    "AUTH_SCREENS",
    "BookingContext",
    "CommentsContext",
    "DETAIL_SCREENS",
    "NavEntry",
    "PhotoContext",
    "Screen",
    "ScreenContext",
    "ScreenNavigator",
    "ServiceContext",
    "ShareContext",
    "TAB_SCREENS",
    "TipContext",
    "coerce_screen",
]
