"""State and validation for the individual screens.

Presentation is out of scope here; these classes hold what a screen edits and
enforce the checks a screen performs before acting.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from .errors import ValidationError
from .models import LocalPost, Service
from .sample_data import SERVICES, TIP_TOTALS

TIP_PRESETS: tuple[str, ...] = ("1", "3", "5", "10")
TIP_RANGES: tuple[str, ...] = tuple(TIP_TOTALS)
TIP_PENDING = "pending_verification"
DEFAULT_CONTACT_PHONE = "+263 77 123 4567"


def parse_tags(text: str) -> list[str]:
    """Split comma separated tags, dropping blanks."""

    return [tag.strip() for tag in text.split(",") if tag.strip()]


@dataclass
class ProfileState:
    """Display name, handle and bio. Kept on the client only."""

    name: str = "Sarah Artist"
    handle: str = "@sarahartist"
    bio: str = ""


@dataclass
class SettingsState:
    role: str = "creator"
    email_notifications: bool = True
    dm_notifications: bool = True

    @property
    def is_creator(self) -> bool:
        return self.role == "creator"

    def set_role(self, role: str) -> None:
        if role not in ("creator", "general"):
            raise ValidationError(f"Unknown role {role!r}")
        self.role = role


@dataclass
class UploadForm:
    file_name: str | None = None
    title: str = ""
    stone_type: str = ""
    story: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)

    def add_tag(self, tag: str) -> bool:
        value = tag.strip()
        if not value or value in self.tags:
            return False
        self.tags.append(value)
        return True

    def remove_tag(self, tag: str) -> None:
        self.tags = [existing for existing in self.tags if existing != tag]

    def validate(self) -> None:
        if not self.file_name:
            raise ValidationError("Please select a file to upload")
        if not self.title.strip() or not self.stone_type.strip() or not self.story.strip():
            raise ValidationError("Please fill in Title, Stone Type, and Story")

    def build(self, post_id: int, profile: ProfileState) -> LocalPost:
        """Validate and turn the form into a local post authored by ``profile``."""

        self.validate()
        return LocalPost(
            id=post_id,
            sculptor_name=profile.name or "You",
            username=profile.handle or "@you",
            image_title=self.title,
            stone_type=self.stone_type,
            story=self.story,
            description=self.description or self.story or "",
            tags=tuple(self.tags),
            phone=DEFAULT_CONTACT_PHONE,
            file_name=self.file_name,
        )

    def reset(self) -> None:
        self.file_name = None
        self.title = ""
        self.stone_type = ""
        self.story = ""
        self.description = ""
        self.tags = []


@dataclass
class EditForm:
    """Inline edit of an uploaded post."""

    title: str = ""
    stone_type: str = ""
    story: str = ""
    description: str = ""
    tags_text: str = ""

    @classmethod
    def from_post(cls, post: LocalPost) -> "EditForm":
        return cls(
            title=post.image_title,
            stone_type=post.stone_type,
            story=post.story,
            description=post.description,
            tags_text=", ".join(post.tags),
        )

    def to_patch(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "stone_type": self.stone_type,
            "story": self.story,
            "description": self.description,
            "tags": parse_tags(self.tags_text),
        }


class ServiceCatalog:
    def __init__(self, services: tuple[Service, ...] = SERVICES) -> None:
        self._services = list(services)

    @property
    def services(self) -> list[Service]:
        return list(self._services)

    def find(self, name: str) -> Service | None:
        return next((service for service in self._services if service.name == name), None)

    def add(self, name: str, price: str, description: str = "") -> Service:
        if not name.strip() or not price.strip():
            raise ValidationError("Please enter name and price")
        service = Service(name.strip(), price.strip(), description.strip())
        self._services.insert(0, service)
        return service


def request_booking(service: Service | None, client_name: str, date: str, notes: str = "") -> str:
    """Validate a booking request and return the confirmation shown to the user."""

    if service is None:
        raise ValidationError("No service selected.")
    if not client_name.strip() or not date.strip():
        raise ValidationError("Please enter your name and preferred date")
    return f"Request sent for {service.name} on {date.strip()}. We'll get back to you!"


class MessageThread:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def send(self, text: str) -> bool:
        body = text.strip()
        if not body:
            return False
        self.messages.append(body)
        return True


@dataclass(frozen=True, slots=True)
class TipReceipt:
    """A tip the sender says they paid; nothing checks it against a payment rail."""

    post_id: int | str | None
    amount: Decimal
    recipient: str
    transaction_ref: str
    status: str = TIP_PENDING


@dataclass
class TipDraft:
    post_id: int | str | None
    recipient: str
    amount: str = "5"

    def select_preset(self, preset: str) -> None:
        if preset not in TIP_PRESETS:
            raise ValidationError(f"Unknown tip preset {preset!r}")
        self.amount = preset

    def parsed_amount(self) -> Decimal:
        try:
            value = Decimal(self.amount.strip())
        except InvalidOperation as exc:
            raise ValidationError("Please enter a valid amount") from exc
        if not value.is_finite() or value <= 0:
            raise ValidationError("Please enter a valid amount")
        return value

    def instructions(self) -> str:
        return f"Please send ${self.amount} to {self.recipient} to complete the tip."

    def confirm(self, transaction_ref: str) -> TipReceipt:
        amount = self.parsed_amount()
        reference = transaction_ref.strip()
        if not reference:
            raise ValidationError("Please enter your transaction ID")
        return TipReceipt(post_id=self.post_id, amount=amount, recipient=self.recipient, transaction_ref=reference)


def share_url(base_url: str, post_id: int | str | None) -> str:
    suffix = "" if post_id is None else str(post_id)
    return f"{base_url.rstrip('/')}/#post-{suffix}"


def tip_totals(period: str) -> tuple[int, int]:
    """Return ``(count, amount)`` for ``Daily``, ``Monthly`` or ``Yearly``."""

    try:
        return TIP_TOTALS[period]
    except KeyError as exc:
        raise ValidationError(f"Unknown range {period!r}") from exc


__all__ = [
    "EditForm",
    "MessageThread",
    "ProfileState",
    "ServiceCatalog",
    "SettingsState",
    "TIP_PENDING",
    "TIP_PRESETS",
    "TIP_RANGES",
    "TipDraft",
    "TipReceipt",
    "UploadForm",
    "parse_tags",
    "request_booking",
    "share_url",
    "tip_totals",
]
