"""Validation helpers shared by the builders.

Each check returns an error value on failure and None otherwise; the caller
decides whether to record it.
"""

from __future__ import annotations

from pydantic import HttpUrl, TypeAdapter, ValidationError

from fluent_embed.errors import InvalidURL, LimitExceeded, ValueOutOfRange

__all__ = ["check_length", "check_range", "check_url"]

ATTACHMENT_SCHEME = "attachment://"

_http_url = TypeAdapter(HttpUrl)


def check_length(
    kind: str, text: str, limit: int, *, echo: bool = True
) -> LimitExceeded | None:
    """Check ``text`` against a character limit.

    Args:
        kind: Label for the error, e.g. "embed title".
        text: The candidate value.
        limit: Maximum allowed length (inclusive).
        echo: Whether the error should carry the rejected text.

    Returns:
        LimitExceeded if the text is too long, else None.
    """
    if len(text) <= limit:
        return None
    return LimitExceeded(kind, limit, len(text), text if echo else None)


def check_range(
    kind: str, value: int, lower: int, upper: int | None = None
) -> ValueOutOfRange | None:
    """Check ``lower <= value < upper``; ``upper=None`` leaves it unbounded."""
    if value >= lower and (upper is None or value < upper):
        return None
    return ValueOutOfRange(kind, value, lower, upper)


def check_url(kind: str, url: str, *, allow_attachment: bool = False) -> InvalidURL | None:
    """Check that ``url`` is an absolute http(s) URL.

    Args:
        kind: Label for the error.
        url: The candidate URL.
        allow_attachment: Also accept ``attachment://<filename>`` references
            to files uploaded alongside the message.

    Returns:
        InvalidURL if the value does not parse, else None.
    """
    if allow_attachment and url.startswith(ATTACHMENT_SCHEME):
        if len(url) > len(ATTACHMENT_SCHEME):
            return None
        return InvalidURL(kind, url)
    try:
        _http_url.validate_python(url)
    except ValidationError:
        return InvalidURL(kind, url)
    return None
