"""Error accumulation shared by every builder.

Each builder holds an ``ErrorSink`` rather than inheriting error handling
from a common base class.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from fluent_embed.errors import BuilderFinalized
from fluent_embed.events import BuilderEvent, BuilderEventType

if TYPE_CHECKING:
    from fluent_embed.errors import BuildError
    from fluent_embed.events import ObservableMixin

__all__ = ["ErrorSink"]


class ErrorSink:
    """Order-preserving, lazily allocated list of builder errors.

    The backing list does not exist until the first error is recorded, so
    an error-free builder reports ``None`` rather than an empty list.

    Example:
        sink = ErrorSink()
        sink.add(ValueOutOfRange("embed color", -1, 0, 16777216))
        errors = sink.take_all()  # [ValueOutOfRange(...)]
        sink.take_all()           # None
    """

    def __init__(self, owner: ObservableMixin | None = None) -> None:
        """Initialize an empty sink.

        Args:
            owner: Observable builder to notify when errors arrive. Optional.
        """
        self._errors: list[BuildError] | None = None
        self._owner = owner
        self._sealed = False

    def seal(self) -> None:
        """Mark the owning builder as finalized."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        """True once the owning builder has been finalized."""
        return self._sealed

    def guard(self, kind: str) -> bool:
        """Check whether the owning builder may still be mutated.

        Records a ``BuilderFinalized`` error if it may not.

        Args:
            kind: Builder label used in the error, e.g. "embed field".

        Returns:
            True if the mutation may go ahead.
        """
        if self._sealed:
            self.add(BuilderFinalized(kind))
            return False
        return True

    def add(self, error: BuildError) -> None:
        """Record one error.

        Args:
            error: The error to append.
        """
        if self._errors is None:
            self._errors = []
        self._errors.append(error)

        if self._owner is not None:
            self._owner.notify(
                BuilderEvent(
                    event_type=BuilderEventType.ERROR_ADDED,
                    source=self._owner,
                    data={"error": error},
                )
            )

    def add_all(self, errors: Iterable[BuildError] | None) -> None:
        """Append errors collected elsewhere, keeping their order.

        Duplicates are kept. ``None`` and empty iterables are no-ops and do
        not allocate the backing list.

        Args:
            errors: Errors returned by a sub-builder's ``finalize()``.
        """
        if errors is None:
            return
        absorbed = list(errors)
        if not absorbed:
            return
        if self._errors is None:
            self._errors = []
        self._errors.extend(absorbed)

        if self._owner is not None:
            self._owner.notify(
                BuilderEvent(
                    event_type=BuilderEventType.ERRORS_ABSORBED,
                    source=self._owner,
                    data={"errors": absorbed},
                )
            )

    def take_all(self) -> list[BuildError] | None:
        """Return the collected errors and reset the sink.

        Returns:
            The error list, or None if nothing was recorded.
        """
        errors, self._errors = self._errors, None
        return errors

    @property
    def errors(self) -> list[BuildError] | None:
        """Copy of the current errors, or None if there are none."""
        return None if self._errors is None else self._errors.copy()

    @property
    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return bool(self._errors)

    def __len__(self) -> int:
        return 0 if self._errors is None else len(self._errors)

    def __repr__(self) -> str:
        return f"ErrorSink(errors={len(self)})"
