"""Fluent builder for the root embed object.

All setters act on the embed they are called on and return it, so a whole
embed can be described in one chain:

    raw, errors = (
        Embed()
        .set_title("Nightly build")
        .set_description("All green")
        .set_color(0x2ECC71)
        .add_field(Field("Duration", "12m", inline=True))
        .set_footer(Footer().set_text("ci"))
        .set_current_timestamp()
        .finalize()
    )
    if errors:
        ...

Setters that hit a platform limit do nothing except record an error
(they fail silently). Errors recorded by sub-builders move into the embed's
error list when the sub-builder is attached.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from fluent_embed.author import Author
from fluent_embed.checks import check_length, check_range, check_url
from fluent_embed.errors import BuilderFinalized, CollectionLimitReached, InvalidEnumValue
from fluent_embed.events import BuilderEvent, BuilderEventType, ObservableMixin
from fluent_embed.field import Field
from fluent_embed.footer import Footer
from fluent_embed.limits import DEFAULT_LIMITS, EmbedLimits
from fluent_embed.media import Image, Thumbnail, Video
from fluent_embed.provider import Provider
from fluent_embed.schema import (
    EMBED_TYPES,
    RawAuthor,
    RawEmbed,
    RawField,
    RawFooter,
    RawImage,
    RawProvider,
    RawThumbnail,
    RawVideo,
)
from fluent_embed.sink import ErrorSink

if TYPE_CHECKING:
    from fluent_embed.errors import BuildError
    from fluent_embed.protocols import BuilderProtocol

__all__ = ["Embed"]


def _require(value: object, expected: type) -> None:
    if not isinstance(value, expected):
        raise TypeError(f"expected {expected.__name__}, got {type(value).__name__}")


class Embed(ObservableMixin):
    """Builder wrapping a ``RawEmbed``.

    Construct it empty, call setters in any order, then ``finalize()`` to
    get the raw embed and every error collected along the way. Scalar
    setters overwrite (last write wins); ``add_field`` appends.

    After ``finalize()`` the builder is closed: further setters record a
    ``BuilderFinalized`` error and leave the raw embed untouched. Calling
    ``finalize()`` again returns the same raw object.

    Example:
        embed = Embed().set_title("x" * 300)  # too long, recorded
        raw, errors = embed.finalize()
        print(errors[0].message)
    """

    kind = "embed"

    def __init__(self, *, limits: EmbedLimits = DEFAULT_LIMITS) -> None:
        """Initialize an empty embed builder.

        Args:
            limits: Limits to validate against. Sub-builders carry their own.
        """
        super().__init__()
        self._raw = RawEmbed()
        self._limits = limits
        self._sink = ErrorSink(owner=self)

    # ------------------------------------------------------------------
    # Scalar properties
    # ------------------------------------------------------------------

    def set_title(self, title: str) -> Embed:
        """Set the title.

        The platform limits titles to 256 characters, so nothing happens
        (besides recording an error) if the title is longer.
        (This method fails silently)
        """
        if not self._sink.guard(self.kind):
            return self
        error = check_length("embed title", title, self._limits.title)
        if error is None:
            self._raw.title = title
        else:
            self._sink.add(error)
        return self

    def set_description(self, description: str) -> Embed:
        """Set the description.

        Limited to 2048 characters; the recorded error carries the length
        but not the text.
        (This method fails silently)
        """
        if not self._sink.guard(self.kind):
            return self
        error = check_length(
            "embed description", description, self._limits.description, echo=False
        )
        if error is None:
            self._raw.description = description
        else:
            self._sink.add(error)
        return self

    def set_url(self, url: str) -> Embed:
        """Set the link applied to the title.

        Unvalidated unless ``limits.check_urls`` is enabled.
        """
        if not self._sink.guard(self.kind):
            return self
        if self._limits.check_urls:
            error = check_url("embed url", url)
            if error is not None:
                self._sink.add(error)
                return self
        self._raw.url = url
        return self

    def set_color(self, color: int) -> Embed:
        """Set the sidebar colour.

        Values must lie in ``[0, 16777216)``, i.e. a 24-bit RGB integer.
        (This method fails silently)
        """
        if not self._sink.guard(self.kind):
            return self
        error = check_range("embed color", color, 0, self._limits.max_color)
        if error is None:
            self._raw.color = color
        else:
            self._sink.add(error)
        return self

    def set_current_timestamp(self) -> Embed:
        """Set the timestamp to now, in UTC."""
        return self._set_timestamp(datetime.now(timezone.utc))

    def set_custom_timestamp(self, timestamp: datetime) -> Embed:
        """Set the timestamp to ``timestamp`` converted to UTC.

        Naive datetimes are interpreted as local time.
        """
        return self._set_timestamp(timestamp.astimezone(timezone.utc))

    def _set_timestamp(self, timestamp: datetime) -> Embed:
        if self._sink.guard(self.kind):
            self._raw.timestamp = timestamp
        return self

    def set_type(self, embed_type: str) -> Embed:
        """Set the embed type if it is one of ``EMBED_TYPES``.

        (This method fails silently)
        """
        if not self._sink.guard(self.kind):
            return self
        if embed_type in EMBED_TYPES:
            self._raw.type = embed_type
        else:
            self._sink.add(InvalidEnumValue(embed_type, EMBED_TYPES))
        return self

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def inline_all_fields(self) -> Embed:
        """Mark every currently attached field as inline."""
        return self._set_all_inline(True)

    def outline_all_fields(self) -> Embed:
        """Mark every currently attached field as not inline."""
        return self._set_all_inline(False)

    def _set_all_inline(self, inline: bool) -> Embed:
        if self._sink.guard(self.kind):
            for f in self._raw.fields:
                f.inline = inline
        return self

    def add_field(self, field: Field) -> Embed:
        """Finalize ``field`` and attach it.

        The field's errors are always absorbed, even if the embed already
        holds the maximum number of fields and the field itself is dropped.
        (This method fails silently)
        """
        res = self._absorb(field, Field)
        if res is None:
            return self
        return self.add_raw_field(res)

    def add_fields(self, *fields: Field) -> Embed:
        """Add several fields, one at a time, in order.

        Once the field limit is reached each remaining field is rejected
        with its own error.
        """
        for f in fields:
            self.add_field(f)
        return self

    def add_raw_field(self, field: RawField) -> Embed:
        """Attach an already built ``RawField`` if the field limit allows it.

        (This method fails silently)

        Raises:
            TypeError: If ``field`` is not a ``RawField``.
        """
        _require(field, RawField)
        if not self._sink.guard(self.kind):
            return self
        if len(self._raw.fields) < self._limits.field_count:
            self._raw.fields.append(field)
        else:
            self._sink.add(CollectionLimitReached(field.name, self._limits.field_count))
        return self

    def add_raw_fields(self, *fields: RawField) -> Embed:
        for f in fields:
            self.add_raw_field(f)
        return self

    # ------------------------------------------------------------------
    # Nested fragments
    # ------------------------------------------------------------------

    def set_author(self, author: Author) -> Embed:
        """Finalize ``author`` and attach it, absorbing its errors."""
        res = self._absorb(author, Author)
        return self if res is None else self.set_raw_author(res)

    def set_raw_author(self, author: RawAuthor) -> Embed:
        return self._set_fragment("author", author, RawAuthor)

    def set_footer(self, footer: Footer) -> Embed:
        """Finalize ``footer`` and attach it, absorbing its errors."""
        res = self._absorb(footer, Footer)
        return self if res is None else self.set_raw_footer(res)

    def set_raw_footer(self, footer: RawFooter) -> Embed:
        return self._set_fragment("footer", footer, RawFooter)

    def set_image(self, image: Image) -> Embed:
        """Finalize ``image`` and attach it, absorbing its errors."""
        res = self._absorb(image, Image)
        return self if res is None else self.set_raw_image(res)

    def set_raw_image(self, image: RawImage) -> Embed:
        return self._set_fragment("image", image, RawImage)

    def set_thumbnail(self, thumbnail: Thumbnail) -> Embed:
        """Finalize ``thumbnail`` and attach it, absorbing its errors."""
        res = self._absorb(thumbnail, Thumbnail)
        return self if res is None else self.set_raw_thumbnail(res)

    def set_raw_thumbnail(self, thumbnail: RawThumbnail) -> Embed:
        return self._set_fragment("thumbnail", thumbnail, RawThumbnail)

    def set_video(self, video: Video) -> Embed:
        """Finalize ``video`` and attach it, absorbing its errors."""
        res = self._absorb(video, Video)
        return self if res is None else self.set_raw_video(res)

    def set_raw_video(self, video: RawVideo) -> Embed:
        return self._set_fragment("video", video, RawVideo)

    def set_provider(self, provider: Provider) -> Embed:
        """Finalize ``provider`` and attach it, absorbing its errors."""
        res = self._absorb(provider, Provider)
        return self if res is None else self.set_raw_provider(res)

    def set_raw_provider(self, provider: RawProvider) -> Embed:
        return self._set_fragment("provider", provider, RawProvider)

    def _set_fragment(self, attr: str, fragment: Any, expected: type) -> Embed:
        _require(fragment, expected)
        if self._sink.guard(self.kind):
            setattr(self._raw, attr, fragment)
        return self

    def _absorb(self, builder: BuilderProtocol[Any], expected: type) -> Any | None:
        """Finalize a sub-builder and take over its errors.

        Args:
            builder: The sub-builder to finalize.
            expected: Builder class the caller accepts.

        Returns:
            The raw fragment, or None if it must not be attached because
            this embed or the sub-builder was already finalized.

        Raises:
            TypeError: If ``builder`` is not an instance of ``expected``.
        """
        _require(builder, expected)
        if not self._sink.guard(self.kind):
            return None
        if builder.is_finalized:
            self._sink.add(BuilderFinalized(builder.kind))
            return None
        res, errs = builder.finalize()
        self._sink.add_all(errs)
        return res

    # ------------------------------------------------------------------
    # Inspection and finalize
    # ------------------------------------------------------------------

    @property
    def raw(self) -> RawEmbed:
        """The wrapped raw embed (still owned by this builder until finalized)."""
        return self._raw

    @property
    def limits(self) -> EmbedLimits:
        return self._limits

    @property
    def errors(self) -> list[BuildError] | None:
        """Snapshot of the errors recorded so far, or None."""
        return self._sink.errors

    @property
    def has_errors(self) -> bool:
        return self._sink.has_errors

    @property
    def is_finalized(self) -> bool:
        return self._sink.sealed

    def finalize(self) -> tuple[RawEmbed, list[BuildError] | None]:
        """Strip away the builder and return the raw embed.

        Should always be called before the embed is sent. Finalize also
        purges the error list, so a second call returns None for errors
        unless something was recorded in between.

        Returns:
            Tuple of (RawEmbed, list of errors or None).

        Note:
            Emits a BuilderEventType.FINALIZED event to all registered
            observers.
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
        return (
            f"Embed(title={self._raw.title!r}, fields={len(self._raw.fields)}, "
            f"errors={len(self._sink)}, finalized={self.is_finalized})"
        )
