"""Raw embed schema.

Pydantic models mirroring the chat platform's embed payload. Builders own
and mutate these; the finished ``RawEmbed`` is what a sender transmits.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "EMBED_TYPES",
    "RawAuthor",
    "RawEmbed",
    "RawField",
    "RawFooter",
    "RawImage",
    "RawProvider",
    "RawThumbnail",
    "RawVideo",
]

EMBED_TYPES: frozenset[str] = frozenset({"rich", "image", "video", "gifv", "article", "link"})
"""Embed types accepted by the platform."""


class _RawModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class RawField(_RawModel):
    """A name/value pair rendered in the embed body."""

    name: str | None = None
    value: str | None = None
    inline: bool = False


class RawAuthor(_RawModel):
    """Author block shown above the title."""

    name: str | None = None
    url: str | None = None
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class RawFooter(_RawModel):
    """Footer block shown below the body."""

    text: str | None = None
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class RawImage(_RawModel):
    """Large image shown below the body."""

    url: str | None = None
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class RawThumbnail(_RawModel):
    """Small image shown beside the body."""

    url: str | None = None
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class RawVideo(_RawModel):
    url: str | None = None
    height: int | None = None
    width: int | None = None


class RawProvider(_RawModel):
    name: str | None = None
    url: str | None = None


class RawEmbed(_RawModel):
    """Root embed payload.

    Attributes:
        title: Title text.
        description: Body text.
        url: Link applied to the title.
        color: Sidebar colour as a 24-bit RGB integer.
        timestamp: Timezone-aware UTC timestamp shown in the footer.
        type: One of ``EMBED_TYPES``.
        fields: Attached fields, in display order.
    """

    title: str | None = None
    description: str | None = None
    url: str | None = None
    color: int | None = None
    timestamp: datetime | None = None
    type: str | None = None
    author: RawAuthor | None = None
    footer: RawFooter | None = None
    image: RawImage | None = None
    thumbnail: RawThumbnail | None = None
    video: RawVideo | None = None
    provider: RawProvider | None = None
    fields: list[RawField] = Field(default_factory=list)

    @property
    def character_count(self) -> int:
        """Number of characters counted against the platform's total text budget."""
        parts: list[str | None] = [self.title, self.description]
        for f in self.fields:
            parts.extend((f.name, f.value))
        if self.footer is not None:
            parts.append(self.footer.text)
        if self.author is not None:
            parts.append(self.author.name)
        return sum(len(p) for p in parts if p)

    def to_payload(self) -> dict[str, Any]:
        """Dump the embed as a JSON-ready dict, omitting unset values.

        Empty ``fields`` are dropped as well, matching what the platform
        expects for an embed without fields.
        """
        payload = self.model_dump(mode="json", exclude_none=True)
        if not payload.get("fields"):
            payload.pop("fields", None)
        return payload
