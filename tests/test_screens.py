from __future__ import annotations

from decimal import Decimal

import pytest

from artbase.client.errors import ValidationError
from artbase.client.models import LocalPost, Service
from artbase.client.screens import (
    TIP_PENDING,
    EditForm,
    MessageThread,
    ProfileState,
    ServiceCatalog,
    SettingsState,
    TipDraft,
    UploadForm,
    parse_tags,
    request_booking,
    share_url,
    tip_totals,
)


def test_upload_form_requires_file_then_core_fields() -> None:
    form = UploadForm(title="Storm", stone_type="Granite", story="Wind")
    with pytest.raises(ValidationError) as missing_file:
        form.validate()
    assert missing_file.value.message == "Please select a file to upload"

    form.file_name = "storm.jpg"
    form.story = "  "
    with pytest.raises(ValidationError) as missing_story:
        form.validate()
    assert missing_story.value.message == "Please fill in Title, Stone Type, and Story"


def test_upload_form_builds_local_post() -> None:
    form = UploadForm(file_name="storm.jpg", title="Storm", stone_type="Granite", story="Wind")
    assert form.add_tag(" granite ")
    assert not form.add_tag("granite")
    assert not form.add_tag("  ")
    form.add_tag("wind")
    form.remove_tag("wind")

    post = form.build(42, ProfileState())
    assert post.id == 42
    assert post.sculptor_name == "Sarah Artist"
    assert post.tags == ("granite",)
    assert post.description == "Wind"
    assert post.is_uploaded

    form.reset()
    assert form.file_name is None
    assert form.tags == []


def test_edit_form_round_trips_tags_text() -> None:
    post = LocalPost(
        id=1,
        sculptor_name="Sarah Artist",
        username="@sarahartist",
        image_title="Storm",
        stone_type="Granite",
        story="Wind",
        tags=("granite", "wind"),
    )
    form = EditForm.from_post(post)
    assert form.tags_text == "granite, wind"
    form.tags_text = "granite, , calm"
    assert form.to_patch()["tags"] == ["granite", "calm"]


def test_parse_tags_drops_blanks() -> None:
    assert parse_tags(" a, b ,,c ") == ["a", "b", "c"]
    assert parse_tags("") == []


def test_settings_role_controls_creator_flag() -> None:
    settings = SettingsState()
    assert settings.is_creator
    settings.set_role("general")
    assert not settings.is_creator
    with pytest.raises(ValidationError):
        settings.set_role("admin")


def test_service_catalog_prepends_new_services() -> None:
    catalog = ServiceCatalog()
    seeded = len(catalog.services)
    with pytest.raises(ValidationError):
        catalog.add("Portrait bust", " ")

    added = catalog.add(" Portrait bust ", "$900")
    assert catalog.services[0] == added
    assert added.name == "Portrait bust"
    assert len(catalog.services) == seeded + 1
    assert catalog.find("Portrait bust") == added
    assert catalog.find("Missing") is None


def test_booking_requires_service_name_and_date() -> None:
    service = Service("Custom Commission", "$500")
    with pytest.raises(ValidationError) as no_service:
        request_booking(None, "Ana", "Friday")
    assert no_service.value.message == "No service selected."
    with pytest.raises(ValidationError):
        request_booking(service, "Ana", "")

    message = request_booking(service, "Ana", " Friday ")
    assert message == "Request sent for Custom Commission on Friday. We'll get back to you!"


def test_message_thread_ignores_blank_messages() -> None:
    thread = MessageThread()
    assert not thread.send("   ")
    assert thread.send(" hi ")
    assert thread.messages == ["hi"]


def test_tip_draft_produces_pending_receipt() -> None:
    draft = TipDraft(post_id=3, recipient="+263 77 123 4567")
    draft.select_preset("10")
    assert draft.instructions() == "Please send $10 to +263 77 123 4567 to complete the tip."

    with pytest.raises(ValidationError):
        draft.confirm("  ")

    receipt = draft.confirm("TX-991")
    assert receipt.amount == Decimal("10")
    assert receipt.status == TIP_PENDING
    assert receipt.post_id == 3


@pytest.mark.parametrize("amount", ["", "abc", "0", "-2", "NaN"])
def test_tip_draft_rejects_invalid_amounts(amount: str) -> None:
    draft = TipDraft(post_id=None, recipient="x", amount=amount)
    with pytest.raises(ValidationError):
        draft.parsed_amount()


def test_share_url_and_tip_totals() -> None:
    assert share_url("https://artbase.example/", 7) == "https://artbase.example/#post-7"
    assert share_url("https://artbase.example", None) == "https://artbase.example/#post-"
    assert tip_totals("Monthly") == (102, 487)
    with pytest.raises(ValidationError):
        tip_totals("Weekly")
