"""Observer pattern implementation for builder events.

Provides event types, observer protocol, and mixin for adding observer
support to builders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "BuilderEventType",
    "BuilderEvent",
    "BuilderObserver",
    "ObservableMixin",
]


class BuilderEventType(Enum):
    """Types of builder events that can be observed."""

    ERROR_ADDED = auto()
    """Emitted when a builder records one of its own validation errors."""

    ERRORS_ABSORBED = auto()
    """Emitted when a builder takes over the errors of a finalized sub-builder."""

    FINALIZED = auto()
    """Emitted when a builder hands out its raw object."""


@dataclass
class BuilderEvent:
    """A builder event that can be observed.

    Attributes:
        event_type: The type of event that occurred.
        source: The builder that emitted the event.
        data: Event-specific data dictionary.

    Example:
        event = BuilderEvent(
            event_type=BuilderEventType.ERROR_ADDED,
            source=embed,
            data={"error": LimitExceeded("embed title", 256, 300)},
        )
    """

    event_type: BuilderEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class BuilderObserver(Protocol):
    """Protocol for builder event observers.

    Implement this protocol to receive builder events, e.g. to log
    validation failures as they happen instead of after ``finalize()``.

    Example:
        class PrintingObserver:
            def on_event(self, event: BuilderEvent) -> None:
                if event.event_type == BuilderEventType.ERROR_ADDED:
                    print(event.data["error"])
    """

    def on_event(self, event: BuilderEvent) -> None:
        """Handle a builder event.

        Args:
            event: The builder event to handle.
        """
        ...


class ObservableMixin:
    """Observer registry for builders.

    Builders call ``super().__init__()`` before creating their ``ErrorSink``,
    which reports through ``notify``.

    Example:
        embed = Embed()
        embed.add_observer(PrintingObserver())
        embed.set_color(-1)  # observer notified
    """

    def __init__(self) -> None:
        self._observers: list[BuilderObserver] = []

    def add_observer(self, observer: BuilderObserver) -> None:
        """Register ``observer``; registering it twice has no effect."""
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: BuilderObserver) -> None:
        """Unregister ``observer`` if it is registered."""
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: BuilderEvent) -> None:
        """Hand ``event`` to every observer, in registration order."""
        for observer in self._observers:
            observer.on_event(event)

    @property
    def observers(self) -> list[BuilderObserver]:
        """Copy of the registered observers."""
        return list(self._observers)

    def clear_observers(self) -> None:
        self._observers.clear()
