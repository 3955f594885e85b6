"""Builder protocol for type checking.

Builders share no base class; any object with this shape can be finalized
and absorbed by a parent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from fluent_embed.errors import BuildError

R = TypeVar("R", covariant=True)


@runtime_checkable
class BuilderProtocol(Protocol[R]):
    """Protocol for embed builders.

    Generic over R, the raw schema fragment the builder produces.
    """

    kind: str

    @property
    def is_finalized(self) -> bool:
        """True once ``finalize()`` has been called."""
        ...

    def finalize(self) -> tuple[R, list[BuildError] | None]:
        """Return the raw fragment and collected errors, clearing the errors."""
        ...
