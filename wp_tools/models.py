# wp_tools/models.py
"""Post records parsed once at the API boundary, plus the duplicate group type."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class PostStatus(str, Enum):
    PUBLISH = "publish"
    DRAFT = "draft"
    PRIVATE = "private"
    PENDING = "pending"
    FUTURE = "future"
    TRASH = "trash"
    ANY = "any"   # query-only; never a post's own status


def extract_title(value) -> str:
    """Resolve the REST `title` field to plain text.

    WordPress sends {"rendered": ..., "raw": ...} (raw only with context=edit);
    older plugins and fixtures send a plain string.
    """
    if isinstance(value, dict):
        for key in ("rendered", "raw"):
            text = value.get(key)
            if isinstance(text, str) and text:
                return text
        return ""
    if isinstance(value, str):
        return value
    return ""


def parse_wp_datetime(value) -> Optional[datetime]:
    """Parse a WordPress ISO-8601 timestamp ("2024-05-01T09:30:00"). None if unusable."""
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    # Compare everything as naive UTC so mixed inputs still sort.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


@dataclass(frozen=True)
class RemoteItem:
    id: int
    title: str
    status: str = ""
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
    slug: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "RemoteItem":
        if not isinstance(data, dict):
            raise TypeError(f"expected a post object, got {type(data).__name__}")
        created = parse_wp_datetime(data.get("date"))
        modified = parse_wp_datetime(data.get("modified")) or created
        return cls(
            id=int(data["id"]),
            title=extract_title(data.get("title")),
            status=data.get("status") or "",
            created_at=created,
            modified_at=modified,
            slug=data.get("slug") or "",
        )


@dataclass(frozen=True)
class DuplicateGroup:
    normalized_title: str
    keep: RemoteItem
    to_delete: tuple = field(default_factory=tuple)

    @property
    def title(self) -> str:
        return self.keep.title

    @property
    def members(self) -> tuple:
        return (self.keep,) + tuple(self.to_delete)
