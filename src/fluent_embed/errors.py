"""Validation error values.

Builders never raise these. They are recorded in an ``ErrorSink`` and handed
back from ``finalize()`` so a whole chain of setters can be inspected at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fluent_embed.schema import EMBED_TYPES

__all__ = [
    "BuildError",
    "BuilderFinalized",
    "CollectionLimitReached",
    "InvalidEnumValue",
    "InvalidURL",
    "LimitExceeded",
    "ValueOutOfRange",
]


@dataclass(frozen=True)
class BuildError:
    """Base class for all recorded builder errors."""

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""
        return self.__class__.__name__

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class LimitExceeded(BuildError):
    """A string was longer than the platform allows.

    ``value`` is left as None for long texts (descriptions, footers) so the
    error does not echo kilobytes of input.
    """

    kind: str
    limit: int
    length: int
    value: str | None = None

    @property
    def message(self) -> str:
        msg = (
            f"{self.kind} has a character limit of {self.limit}, "
            f"but the given text has a length of {self.length}"
        )
        if self.value is not None:
            msg += f": {self.value}"
        return msg


@dataclass(frozen=True)
class ValueOutOfRange(BuildError):
    """A number fell outside ``[lower, upper)``. ``upper=None`` means unbounded."""

    kind: str
    value: int
    lower: int
    upper: int | None = None

    @property
    def message(self) -> str:
        if self.upper is None:
            return f"{self.kind} must be at least {self.lower}, got {self.value}"
        return f"{self.kind} must be between {self.lower} and {self.upper}, got {self.value}"


@dataclass(frozen=True)
class CollectionLimitReached(BuildError):
    """An append was attempted on a full collection."""

    item: str | None
    limit: int

    @property
    def message(self) -> str:
        return f"field {self.item!r} was not added, the limit of {self.limit} fields has been reached"


@dataclass(frozen=True)
class InvalidEnumValue(BuildError):
    """A value outside a fixed set of allowed values."""

    value: Any
    allowed: frozenset[str] = field(default=EMBED_TYPES)
    kind: str = "embed type"

    @property
    def message(self) -> str:
        options = ", ".join(sorted(self.allowed))
        return f"{self.value!r} is not a valid {self.kind} (expected one of: {options})"


@dataclass(frozen=True)
class InvalidURL(BuildError):
    """A URL-shaped value that could not be parsed."""

    kind: str
    value: str

    @property
    def message(self) -> str:
        return f"{self.kind} is not a valid URL: {self.value}"


@dataclass(frozen=True)
class BuilderFinalized(BuildError):
    """A builder was mutated or attached after it had been finalized."""

    kind: str

    @property
    def message(self) -> str:
        return f"{self.kind} builder has already been finalized"
