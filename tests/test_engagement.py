from __future__ import annotations

import pytest

from artbase.client.engagement import EngagementState, seeded_engagement
from artbase.client.sample_data import HOME_LIKES, HOME_POSTS, SCULPTOR_LIKES, SCULPTOR_POSTS


@pytest.mark.parametrize("post_id, preliked", [(1, False), (2, True), ("remote-id", False), (999, True)])
def test_double_toggle_restores_like_state(post_id, preliked: bool) -> None:
    state = seeded_engagement(HOME_LIKES, HOME_POSTS)
    if preliked:
        state.toggle_like(post_id)
    before = state.like_state(post_id)

    state.toggle_like(post_id)
    assert state.toggle_like(post_id) == before


def test_toggle_moves_count_relative_to_previous_flag() -> None:
    state = seeded_engagement(SCULPTOR_LIKES, SCULPTOR_POSTS)
    assert state.like_state(3) == (False, 67)
    assert state.toggle_like(3) == (True, 68)
    assert state.toggle_like(3) == (False, 67)
    assert state.entry(3).pending_delta == 0


def test_unseeded_posts_start_at_zero() -> None:
    state = EngagementState()
    assert state.like_state("p1") == (False, 0)
    assert state.comments("p1") == []


def test_seeded_comments_and_new_comments() -> None:
    state = seeded_engagement(SCULPTOR_LIKES, SCULPTOR_POSTS)
    assert [comment.name for comment in state.comments(1)] == ["Art Lover", "John Artist"]

    comment = state.add_comment(1, "  Gorgeous  ")
    assert comment is not None
    assert (comment.name, comment.text, comment.time) == ("You", "Gorgeous", "now")
    assert state.comments(1)[-1] == comment
    assert state.add_comment(1, "   ") is None
    assert len(state.comments(1)) == 3


def test_replies_are_keyed_by_comment_index() -> None:
    state = seeded_engagement(SCULPTOR_LIKES, SCULPTOR_POSTS)
    state.add_reply(2, 0, "Thanks!")
    state.add_reply(2, 0, "Three weeks")
    state.add_reply(2, 1, "About a month")

    assert [reply.text for reply in state.replies(2, 0)] == ["Thanks!", "Three weeks"]
    assert [reply.text for reply in state.replies(2, 1)] == ["About a month"]
    assert state.replies(3, 0) == []
    with pytest.raises(IndexError):
        state.add_reply(2, 5, "nobody to reply to")
