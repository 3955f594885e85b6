"""Fluent builder for the embed author block."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fluent_embed.checks import check_length, check_url
from fluent_embed.events import BuilderEvent, BuilderEventType, ObservableMixin
from fluent_embed.limits import DEFAULT_LIMITS, EmbedLimits
from fluent_embed.schema import RawAuthor
from fluent_embed.sink import ErrorSink

if TYPE_CHECKING:
    from fluent_embed.errors import BuildError

__all__ = ["Author"]


class Author(ObservableMixin):
    """Builder for ``RawAuthor``.

    Example:
        author = (
            Author()
            .set_name("release-bot")
            .set_url("https://example.com/bot")
            .set_icon_url("https://example.com/bot.png")
        )
        embed.set_author(author)
    """

    kind = "embed author"

    def __init__(self, *, limits: EmbedLimits = DEFAULT_LIMITS) -> None:
        super().__init__()
        self._raw = RawAuthor()
        self._limits = limits
        self._sink = ErrorSink(owner=self)

    def set_name(self, name: str) -> Author:
        """Set the author name (fails silently above ``limits.author_name`` characters)."""
        if not self._sink.guard(self.kind):
            return self
        error = check_length("embed author name", name, self._limits.author_name)
        if error is None:
            self._raw.name = name
        else:
            self._sink.add(error)
        return self

    def set_url(self, url: str) -> Author:
        """Set the link applied to the author name."""
        return self._set_url("url", "embed author url", url)

    def set_icon_url(self, url: str) -> Author:
        """Set the author icon. ``attachment://`` references are accepted."""
        return self._set_url("icon_url", "embed author icon url", url, allow_attachment=True)

    def set_proxy_icon_url(self, url: str) -> Author:
        return self._set_url("proxy_icon_url", "embed author proxy icon url", url)

    def _set_url(self, attr: str, kind: str, url: str, *, allow_attachment: bool = False) -> Author:
        if not self._sink.guard(self.kind):
            return self
        if self._limits.check_urls:
            error = check_url(kind, url, allow_attachment=allow_attachment)
            if error is not None:
                self._sink.add(error)
                return self
        setattr(self._raw, attr, url)
        return self

    @property
    def raw(self) -> RawAuthor:
        return self._raw

    @property
    def errors(self) -> list[BuildError] | None:
        return self._sink.errors

    @property
    def is_finalized(self) -> bool:
        return self._sink.sealed

    def finalize(self) -> tuple[RawAuthor, list[BuildError] | None]:
        """Return the raw author and its errors, then clear the errors."""
        self._sink.seal()
        errors = self._sink.take_all()
        self.notify(
            BuilderEvent(
                event_type=BuilderEventType.FINALIZED,
                source=self,
                data={"raw": self._raw, "error_count": len(errors or ())},
            )
        )
        return self._raw, errors
