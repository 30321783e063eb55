"""Client application state: navigator, feeds, engagement and screen state wired together."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from .api import ArtbaseApiClient
from .auth_flow import AuthFlow
from .engagement import EngagementState, seeded_engagement
from .errors import AuthError, ValidationError
from .feed import ClientPostCache
from .models import AnyPost, Comment, FeedEntry, LocalPost, RemotePost, SamplePost, Service
from .navigator import (
    BookingContext,
    CommentsContext,
    PhotoContext,
    Screen,
    ScreenNavigator,
    ServiceContext,
    ShareContext,
    TipContext,
    coerce_screen,
)
from .sample_data import HOME_LIKES, HOME_POSTS, SCULPTOR_FEED, SCULPTOR_LIKES, SCULPTOR_POSTS
from .screens import (
    DEFAULT_CONTACT_PHONE,
    EditForm,
    MessageThread,
    ProfileState,
    ServiceCatalog,
    SettingsState,
    TipDraft,
    UploadForm,
    request_booking,
    share_url,
)

logger = logging.getLogger(__name__)


class ArtbaseApp:
    """One user's client session.

    All mutations happen in response to a discrete user action; nothing here is
    shared between sessions.
    """

    def __init__(
        self,
        api: ArtbaseApiClient,
        *,
        public_base_url: str = "http://localhost:8000",
        tip_recipient: str = DEFAULT_CONTACT_PHONE,
    ) -> None:
        self.api = api
        self.public_base_url = public_base_url
        self.tip_recipient = tip_recipient

        self.navigator = ScreenNavigator(lambda: api.current_user() is not None)
        self.auth = AuthFlow(api, self.navigator)
        self.posts = ClientPostCache(api)
        self.home_engagement: EngagementState = seeded_engagement(HOME_LIKES, HOME_POSTS)
        self.sculptor_engagement: EngagementState = seeded_engagement(SCULPTOR_LIKES, SCULPTOR_POSTS)

        self.profile = ProfileState()
        self.settings = SettingsState()
        self.services = ServiceCatalog()
        self.messages = MessageThread()
        self.upload_form = UploadForm()
        self.tip_draft: TipDraft | None = None

    @classmethod
    def from_settings(cls, api: ArtbaseApiClient) -> "ArtbaseApp":
        """Build a session using the share link base and tip recipient from configuration."""

        from ..config import get_settings

        settings = get_settings()
        return cls(api, public_base_url=settings.public_base_url, tip_recipient=settings.tip_recipient_number)

    @property
    def screen(self) -> Screen:
        return self.navigator.screen

    # feeds

    def home_feed(self) -> list[FeedEntry | SamplePost]:
        return [*self.posts.merged_feed(), *HOME_POSTS]

    def sculptor_feed(self) -> list[LocalPost | SamplePost]:
        return [*self.posts.local_posts, *SCULPTOR_POSTS]

    def refresh_feed(self) -> list[RemotePost]:
        return self.posts.refresh()

    def publish_text(self, text: str) -> RemotePost:
        return self.posts.publish(text)

    def engagement_for(self, post: AnyPost) -> EngagementState:
        if isinstance(post, LocalPost):
            return self.sculptor_engagement
        if isinstance(post, SamplePost) and post.feed == SCULPTOR_FEED:
            return self.sculptor_engagement
        return self.home_engagement

    def toggle_like(self, post: AnyPost) -> tuple[bool, int]:
        return self.engagement_for(post).toggle_like(post.id)

    def add_reply(self, post: AnyPost, comment_index: int, text: str) -> Comment | None:
        return self.engagement_for(post).add_reply(post.id, comment_index, text)

    # navigation

    def open_tab(self, screen: Screen | str) -> Screen:
        """Switch bottom-bar tab. Upload is only offered to creators."""

        target = coerce_screen(screen)
        if target == Screen.UPLOAD and not self.settings.is_creator:
            logger.debug("Upload tab hidden for role %s", self.settings.role)
            return self.screen
        landed = self.navigator.navigate(target)
        if landed == Screen.HOME:
            self.refresh_feed()
        return landed

    def open_messages(self) -> Screen:
        return self.navigator.navigate(Screen.MESSAGES)

    def open_settings(self) -> Screen:
        return self.navigator.navigate(Screen.SETTINGS)

    def open_edit_profile(self) -> Screen:
        return self.navigator.navigate(Screen.EDIT_PROFILE)

    def open_tip_history(self) -> Screen:
        return self.navigator.navigate(Screen.TIP_HISTORY)

    def open_tip(self, post_id: int | str | None) -> TipDraft:
        self.navigator.navigate(Screen.TIP, TipContext(post_id))
        self.tip_draft = TipDraft(post_id=post_id, recipient=self.tip_recipient)
        return self.tip_draft

    def open_share(self, post_id: int | str | None) -> str:
        self.navigator.navigate(Screen.SHARE, ShareContext(post_id))
        return share_url(self.public_base_url, post_id)

    def open_comments(self, post: AnyPost) -> list[Comment]:
        self.navigator.navigate(Screen.COMMENTS, CommentsContext(post))
        return self.engagement_for(post).comments(post.id)

    def open_photo(self, post: AnyPost) -> Screen:
        return self.navigator.navigate(Screen.PHOTO_FULL, PhotoContext(post))

    def open_service(self, service: Service) -> Screen:
        return self.navigator.navigate(Screen.SERVICE_DETAIL, ServiceContext(service))

    def open_booking(self) -> Screen:
        context = self.navigator.context_as(ServiceContext)
        if context is None:
            raise ValidationError("No service selected.")
        return self.navigator.navigate(Screen.BOOK, BookingContext(context.service))

    def back(self) -> Screen:
        if self.screen == Screen.TIP:
            self.tip_draft = None
        return self.navigator.go_back()

    # screen actions

    def add_comment(self, text: str) -> Comment | None:
        """Comment on the post shown by the comments screen."""

        context = self.navigator.context_as(CommentsContext)
        if context is None:
            raise ValidationError("No post selected")
        return self.engagement_for(context.post).add_comment(context.post.id, text)

    def upload(self) -> LocalPost:
        if not self.settings.is_creator:
            raise AuthError("Only creators can upload")
        post = self.upload_form.build(self.posts.next_local_id(), self.profile)
        self.posts.append(post)
        self.upload_form.reset()
        self.navigator.navigate(Screen.PHOTO)
        return post

    def edit_post(self, post_id: int | str, form: EditForm) -> LocalPost | None:
        return self.posts.update(post_id, form.to_patch())

    def update_post(self, post_id: int | str, patch: Mapping[str, Any]) -> LocalPost | None:
        return self.posts.update(post_id, patch)

    def delete_post(self, post_id: int | str) -> bool:
        return self.posts.remove(post_id)

    def submit_booking(self, client_name: str, date: str, notes: str = "") -> str:
        context = self.navigator.context_as(BookingContext)
        confirmation = request_booking(context.service if context else None, client_name, date, notes)
        self.navigator.go_back()
        return confirmation

    def save_profile(self, name: str, handle: str, bio: str) -> str:
        self.profile.name = name
        self.profile.handle = handle
        self.profile.bio = bio
        self.navigator.go_back()
        return "Profile updated"

    def logout(self) -> None:
        self.auth.logout()
        self.posts.invalidate()
        self.tip_draft = None


__all__ = ["ArtbaseApp"]
