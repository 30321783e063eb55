from __future__ import annotations

from datetime import datetime, timezone

import httpx
import pytest

from artbase.client.api import ArtbaseApiClient
from artbase.client.errors import AuthError, FetchError, ValidationError
from artbase.client.feed import ClientPostCache
from artbase.client.models import LocalPost, RemotePost, UserIdentity


class StubApi:
    def __init__(self, posts: list[RemotePost] | None = None) -> None:
        self.posts = list(posts or [])
        self.user: UserIdentity | None = None
        self.fail_with: Exception | None = None
        self.list_calls = 0
        self.created: list[str] = []

    def current_user(self) -> UserIdentity | None:
        return self.user

    def list_posts(self) -> list[RemotePost]:
        self.list_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.posts)

    def create_post(self, title: str, content: str | None = None, published: bool | None = None) -> RemotePost:
        post = RemotePost(id=f"p{len(self.posts) + 1}", title=title, author_id=self.user.id, content=content)
        self.posts.insert(0, post)
        self.created.append(title)
        return post


def _local(post_id: int, title: str) -> LocalPost:
    return LocalPost(
        id=post_id,
        sculptor_name="Sarah Artist",
        username="@sarahartist",
        image_title=title,
        stone_type="Serpentine",
        story="Carved over a winter",
        tags=("stone",),
    )


REMOTE = RemotePost(id="p1", title="Remote", author_id="u1", created_at=datetime(2026, 1, 1, tzinfo=timezone.utc))


def test_local_posts_stay_first_and_editable_after_refresh() -> None:
    api = StubApi()
    cache = ClientPostCache(api)
    cache.refresh()
    storm = _local(cache.next_local_id(), "Storm")
    cache.append(storm)

    feed = cache.merged_feed()
    assert [entry.title for entry in feed] == ["Storm"]
    assert cache.is_editable(storm.id)

    api.posts = [REMOTE]
    cache.refresh()
    feed = cache.merged_feed()
    assert [entry.title for entry in feed] == ["Storm", "Remote"]
    assert [entry.id for entry in feed].count(storm.id) == 1
    assert cache.is_editable(storm.id)
    assert not cache.is_editable("p1")


def test_uploads_are_prepended_newest_first() -> None:
    cache = ClientPostCache(StubApi())
    for title in ("one", "two", "three"):
        cache.append(_local(cache.next_local_id(), title))
    assert [post.title for post in cache.merged_feed()] == ["three", "two", "one"]


def test_local_ids_are_unique_within_the_same_millisecond() -> None:
    cache = ClientPostCache(StubApi(), clock=lambda: 1_700_000_000.0)
    ids = [cache.next_local_id() for _ in range(3)]
    assert ids == [1_700_000_000_000, 1_700_000_000_001, 1_700_000_000_002]


def test_update_applies_only_to_local_posts() -> None:
    api = StubApi([REMOTE])
    cache = ClientPostCache(api)
    cache.refresh()
    local = _local(cache.next_local_id(), "Storm")
    cache.append(local)

    updated = cache.update(local.id, {"title": "Calm", "tags": ["granite", "calm"], "time_ago": "ages ago"})
    assert updated is not None
    assert updated.image_title == "Calm"
    assert updated.tags == ("granite", "calm")
    assert updated.time_ago == "just now"
    assert updated.id == local.id

    assert cache.update("p1", {"title": "Hijacked"}) is None
    assert cache.remote_posts == [REMOTE]
    with pytest.raises(ValueError):
        cache.update(local.id, {"sculptor_name": "Someone else"})


def test_remove_applies_only_to_local_posts() -> None:
    cache = ClientPostCache(StubApi([REMOTE]))
    cache.refresh()
    local = _local(cache.next_local_id(), "Storm")
    cache.append(local)

    assert cache.remove("p1") is False
    assert cache.remove(local.id) is True
    assert cache.remove(local.id) is False
    assert [entry.id for entry in cache.merged_feed()] == ["p1"]


def test_refresh_failure_degrades_to_empty_remote_slice() -> None:
    api = StubApi([REMOTE])
    cache = ClientPostCache(api)
    cache.refresh()
    local = _local(cache.next_local_id(), "Storm")
    cache.append(local)

    api.fail_with = FetchError()
    assert cache.refresh() == []
    assert cache.status == "empty"
    assert [entry.title for entry in cache.merged_feed()] == ["Storm"]


def test_stale_refresh_response_is_discarded() -> None:
    cache = ClientPostCache(StubApi())
    older = cache.begin_refresh()
    newer = cache.begin_refresh()
    assert cache.status == "loading"

    assert cache.complete_refresh(newer, [REMOTE]) is True
    assert cache.complete_refresh(older, []) is False
    assert cache.remote_posts == [REMOTE]
    assert cache.status == "ready"


def test_invalidate_drops_in_flight_refresh() -> None:
    cache = ClientPostCache(StubApi())
    pending = cache.begin_refresh()
    cache.invalidate()
    assert cache.complete_refresh(pending, [REMOTE]) is False
    assert cache.remote_posts == []


def test_publish_requires_session_and_title() -> None:
    api = StubApi()
    cache = ClientPostCache(api)
    with pytest.raises(ValidationError):
        cache.publish("   ")
    with pytest.raises(AuthError):
        cache.publish("Hello")
    assert api.created == []

    api.user = UserIdentity(id="u1", email="maria@example.com")
    post = cache.publish("  Hello ")
    assert post.title == "Hello"
    assert cache.remote_posts[0].title == "Hello"
    assert api.list_calls == 1


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>maintenance</html>"),
        httpx.Response(200, json=[{"title": "no id"}]),
    ],
)
def test_unreadable_server_response_degrades_to_empty_feed(response: httpx.Response) -> None:
    with httpx.Client(transport=httpx.MockTransport(lambda request: response), base_url="http://artbase.test") as http:
        cache = ClientPostCache(ArtbaseApiClient(http))
        cache.append(_local(cache.next_local_id(), "Storm"))

        assert cache.refresh() == []
    assert cache.status == "empty"
    assert not cache.loading
    assert [entry.title for entry in cache.merged_feed()] == ["Storm"]


def test_unexpected_refresh_failure_still_clears_loading() -> None:
    api = StubApi()
    api.fail_with = RuntimeError("boom")
    cache = ClientPostCache(api)
    with pytest.raises(RuntimeError):
        cache.refresh()
    assert cache.status == "empty"


def test_update_splits_tag_text_instead_of_characters() -> None:
    cache = ClientPostCache(StubApi())
    local = _local(cache.next_local_id(), "Storm")
    cache.append(local)

    assert cache.update(local.id, {"tags": "marble"}).tags == ("marble",)
    assert cache.update(local.id, {"tags": "marble, granite ,"}).tags == ("marble", "granite")
