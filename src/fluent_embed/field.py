"""Fluent builder for embed fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fluent_embed.checks import check_length
from fluent_embed.events import BuilderEvent, BuilderEventType, ObservableMixin
from fluent_embed.limits import DEFAULT_LIMITS, EmbedLimits
from fluent_embed.schema import RawField
from fluent_embed.sink import ErrorSink

if TYPE_CHECKING:
    from fluent_embed.errors import BuildError

__all__ = ["Field"]


class Field(ObservableMixin):
    """Builder for a single ``RawField``.

    Fields are finalized when attached to an ``Embed``; their errors move
    into the embed's error list at that moment.

    Example:
        field = Field().set_name("Wins").set_value("12").set_inline()
        embed.add_field(field)

        # Or using the constructor shortcut
        embed.add_field(Field("Losses", "3", inline=True))
    """

    kind = "embed field"

    def __init__(
        self,
        name: str | None = None,
        value: str | None = None,
        inline: bool = False,
        *,
        limits: EmbedLimits = DEFAULT_LIMITS,
    ) -> None:
        """Initialize the builder, optionally setting its contents.

        Arguments given here go through the same validated setters, so an
        over-long name is recorded as an error rather than raised.

        Args:
            name: Field name.
            value: Field value.
            inline: Whether the field renders inline.
            limits: Limits to validate against.
        """
        super().__init__()
        self._raw = RawField()
        self._limits = limits
        self._sink = ErrorSink(owner=self)
        if name is not None:
            self.set_name(name)
        if value is not None:
            self.set_value(value)
        if inline:
            self.set_inline(inline)

    def set_name(self, name: str) -> Field:
        """Set the field name (fails silently above ``limits.field_name`` characters)."""
        if not self._sink.guard(self.kind):
            return self
        error = check_length("embed field name", name, self._limits.field_name)
        if error is None:
            self._raw.name = name
        else:
            self._sink.add(error)
        return self

    def set_value(self, value: str) -> Field:
        """Set the field value (fails silently above ``limits.field_value`` characters).

        The error does not echo the value.
        """
        if not self._sink.guard(self.kind):
            return self
        error = check_length("embed field value", value, self._limits.field_value, echo=False)
        if error is None:
            self._raw.value = value
        else:
            self._sink.add(error)
        return self

    def set_inline(self, inline: bool = True) -> Field:
        if self._sink.guard(self.kind):
            self._raw.inline = inline
        return self

    @property
    def raw(self) -> RawField:
        return self._raw

    @property
    def errors(self) -> list[BuildError] | None:
        """Snapshot of the errors recorded so far, or None."""
        return self._sink.errors

    @property
    def is_finalized(self) -> bool:
        return self._sink.sealed

    def finalize(self) -> tuple[RawField, list[BuildError] | None]:
        """Return the raw field and its errors, then clear the errors.

        Returns:
            Tuple of (RawField, list of errors or None).
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
        return f"Field(name={self._raw.name!r}, inline={self._raw.inline}, errors={len(self._sink)})"
