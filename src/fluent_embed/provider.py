"""Fluent builder for the embed provider block.

The platform normally fills the provider in itself for link embeds. Setting
it by hand is allowed, and nothing about it is length-limited.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fluent_embed.checks import check_url
from fluent_embed.events import BuilderEvent, BuilderEventType, ObservableMixin
from fluent_embed.limits import DEFAULT_LIMITS, EmbedLimits
from fluent_embed.schema import RawProvider
from fluent_embed.sink import ErrorSink

if TYPE_CHECKING:
    from fluent_embed.errors import BuildError

__all__ = ["Provider"]


class Provider(ObservableMixin):
    kind = "embed provider"

    def __init__(self, *, limits: EmbedLimits = DEFAULT_LIMITS) -> None:
        super().__init__()
        self._raw = RawProvider()
        self._limits = limits
        self._sink = ErrorSink(owner=self)

    def set_name(self, name: str) -> Provider:
        if self._sink.guard(self.kind):
            self._raw.name = name
        return self

    def set_url(self, url: str) -> Provider:
        if not self._sink.guard(self.kind):
            return self
        if self._limits.check_urls:
            error = check_url("embed provider url", url)
            if error is not None:
                self._sink.add(error)
                return self
        self._raw.url = url
        return self

    @property
    def raw(self) -> RawProvider:
        return self._raw

    @property
    def errors(self) -> list[BuildError] | None:
        return self._sink.errors

    @property
    def is_finalized(self) -> bool:
        return self._sink.sealed

    def finalize(self) -> tuple[RawProvider, list[BuildError] | None]:
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
