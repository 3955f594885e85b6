"""Fluent builder for the embed footer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fluent_embed.checks import check_length, check_url
from fluent_embed.events import BuilderEvent, BuilderEventType, ObservableMixin
from fluent_embed.limits import DEFAULT_LIMITS, EmbedLimits
from fluent_embed.schema import RawFooter
from fluent_embed.sink import ErrorSink

if TYPE_CHECKING:
    from fluent_embed.errors import BuildError

__all__ = ["Footer"]


class Footer(ObservableMixin):
    """Builder for ``RawFooter``.

    Footer errors are propagated into the embed when the footer is attached
    with ``Embed.set_footer``.

    Example:
        footer = Footer().set_text("Generated nightly").set_icon_url("attachment://logo.png")
        embed.set_footer(footer)
    """

    kind = "embed footer"

    def __init__(self, *, limits: EmbedLimits = DEFAULT_LIMITS) -> None:
        super().__init__()
        self._raw = RawFooter()
        self._limits = limits
        self._sink = ErrorSink(owner=self)

    def set_text(self, text: str) -> Footer:
        """Set the footer text.

        The platform limits footer text to 2048 characters by default. Longer
        text is not applied and the error does not echo it.
        (This method fails silently)
        """
        if not self._sink.guard(self.kind):
            return self
        error = check_length("embed footer text", text, self._limits.footer_text, echo=False)
        if error is None:
            self._raw.text = text
        else:
            self._sink.add(error)
        return self

    def set_icon_url(self, url: str) -> Footer:
        return self._set_url("icon_url", "embed footer icon url", url, allow_attachment=True)

    def set_proxy_icon_url(self, url: str) -> Footer:
        return self._set_url("proxy_icon_url", "embed footer proxy icon url", url)

    def _set_url(self, attr: str, kind: str, url: str, *, allow_attachment: bool = False) -> Footer:
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
    def raw(self) -> RawFooter:
        return self._raw

    @property
    def errors(self) -> list[BuildError] | None:
        return self._sink.errors

    @property
    def is_finalized(self) -> bool:
        return self._sink.sealed

    def finalize(self) -> tuple[RawFooter, list[BuildError] | None]:
        """Return the raw footer and its errors, then clear the errors."""
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
