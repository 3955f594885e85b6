"""Fluent builders for embed media: image, thumbnail and video.

The three fragments share url/height/width; image and thumbnail also carry
a proxy URL. Heights and widths must not be negative.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from fluent_embed.checks import check_range, check_url
from fluent_embed.events import BuilderEvent, BuilderEventType, ObservableMixin
from fluent_embed.limits import DEFAULT_LIMITS, EmbedLimits
from fluent_embed.schema import RawImage, RawThumbnail, RawVideo
from fluent_embed.sink import ErrorSink

if TYPE_CHECKING:
    from fluent_embed.errors import BuildError

__all__ = ["Image", "Thumbnail", "Video"]

R = TypeVar("R", RawImage, RawThumbnail, RawVideo)
M = TypeVar("M", bound="_MediaBuilder")  # type: ignore[type-arg]


class _MediaBuilder(ObservableMixin, ABC, Generic[R]):
    """Shared setters for the media fragments.

    Subclasses set ``kind`` and build their raw fragment in ``_new_raw``.
    """

    kind: str = "embed media"
    allow_attachment: bool = True

    def __init__(self, *, limits: EmbedLimits = DEFAULT_LIMITS) -> None:
        super().__init__()
        self._raw: R = self._new_raw()
        self._limits = limits
        self._sink = ErrorSink(owner=self)

    @abstractmethod
    def _new_raw(self) -> R:
        """Create the empty raw fragment this builder wraps."""
        ...

    def set_url(self: M, url: str) -> M:
        """Set the media source URL.

        With ``limits.check_urls`` enabled the URL must be absolute http(s)
        (or ``attachment://`` for images and thumbnails).
        """
        if not self._sink.guard(self.kind):
            return self
        if self._limits.check_urls:
            error = check_url(f"{self.kind} url", url, allow_attachment=self.allow_attachment)
            if error is not None:
                self._sink.add(error)
                return self
        self._raw.url = url
        return self

    def set_height(self: M, height: int) -> M:
        """Set the height in pixels (fails silently when negative)."""
        return self._set_dimension("height", height)

    def set_width(self: M, width: int) -> M:
        """Set the width in pixels (fails silently when negative)."""
        return self._set_dimension("width", width)

    def _set_dimension(self: M, attr: str, value: int) -> M:
        if not self._sink.guard(self.kind):
            return self
        error = check_range(f"{self.kind} {attr}", value, 0)
        if error is None:
            setattr(self._raw, attr, value)
        else:
            self._sink.add(error)
        return self

    @property
    def raw(self) -> R:
        return self._raw

    @property
    def errors(self) -> list[BuildError] | None:
        return self._sink.errors

    @property
    def is_finalized(self) -> bool:
        return self._sink.sealed

    def finalize(self) -> tuple[R, list[BuildError] | None]:
        """Return the raw fragment and its errors, then clear the errors.

        Returns:
            Tuple of (raw fragment, list of errors or None).
        """
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

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(url={self._raw.url!r}, errors={len(self._sink)})"


class _ProxiedMediaBuilder(_MediaBuilder[R]):
    def set_proxy_url(self: M, url: str) -> M:
        """Set the proxied copy of the media URL."""
        if not self._sink.guard(self.kind):
            return self
        if self._limits.check_urls:
            error = check_url(f"{self.kind} proxy url", url)
            if error is not None:
                self._sink.add(error)
                return self
        self._raw.proxy_url = url
        return self


class Image(_ProxiedMediaBuilder[RawImage]):
    """Builder for ``RawImage``.

    Example:
        embed.set_image(Image().set_url("attachment://chart.png").set_width(800))
    """

    kind = "embed image"

    def _new_raw(self) -> RawImage:
        return RawImage()


class Thumbnail(_ProxiedMediaBuilder[RawThumbnail]):
    """Builder for ``RawThumbnail``."""

    kind = "embed thumbnail"

    def _new_raw(self) -> RawThumbnail:
        return RawThumbnail()


class Video(_MediaBuilder[RawVideo]):
    """Builder for ``RawVideo``.

    Video sources cannot be uploaded attachments, so ``attachment://`` URLs
    are rejected when URL checks are enabled.
    """

    kind = "embed video"
    allow_attachment = False

    def _new_raw(self) -> RawVideo:
        return RawVideo()
