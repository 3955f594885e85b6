"""Platform limits used by the builders.

``EmbedLimits`` gathers every ceiling the builders enforce so that a caller
can tighten them (or switch on URL checks) without subclassing a builder.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["DEFAULT_LIMITS", "EmbedLimits"]


class EmbedLimits(BaseModel):
    """Limits applied at the point of mutation.

    Attributes:
        title: Maximum embed title length.
        description: Maximum embed description length.
        field_count: Maximum number of attached fields.
        field_name: Maximum field name length.
        field_value: Maximum field value length.
        author_name: Maximum author name length.
        footer_text: Maximum footer text length.
        max_color: Exclusive upper bound for the embed colour.
        check_urls: If True, URL setters reject values that do not parse
            as absolute http(s) URLs.

    Example:
        strict = EmbedLimits(description=4096, check_urls=True)
        embed = Embed(limits=strict)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: int = Field(default=256, ge=0)
    description: int = Field(default=2048, ge=0)
    field_count: int = Field(default=25, ge=0)
    field_name: int = Field(default=256, ge=0)
    field_value: int = Field(default=1024, ge=0)
    author_name: int = Field(default=256, ge=0)
    footer_text: int = Field(default=2048, ge=0)
    max_color: int = Field(default=16777216, gt=0)
    check_urls: bool = False


DEFAULT_LIMITS = EmbedLimits()
