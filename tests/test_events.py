"""Tests for observer pattern and builder events."""

from __future__ import annotations

import pytest

from fluent_embed import (
    BuilderEvent,
    BuilderEventType,
    BuilderObserver,
    Embed,
    Field,
    Footer,
    LimitExceeded,
    ObservableMixin,
)

from .conftest import RecordingObserver


class CountingObserver:
    """Observer that counts events by type."""

    def __init__(self) -> None:
        self.counts: dict[BuilderEventType, int] = {}

    def on_event(self, event: BuilderEvent) -> None:
        self.counts[event.event_type] = self.counts.get(event.event_type, 0) + 1


# =============================================================================
# BuilderEventType / BuilderEvent Tests
# =============================================================================


class TestBuilderEventType:
    """Tests for BuilderEventType enum."""

    def test_event_types_are_distinct(self) -> None:
        types = list(BuilderEventType)

        assert len(types) == len({t.value for t in types})
        assert BuilderEventType.ERROR_ADDED in types
        assert BuilderEventType.ERRORS_ABSORBED in types
        assert BuilderEventType.FINALIZED in types


class TestBuilderEvent:
    """Tests for BuilderEvent dataclass."""

    def test_default_data(self) -> None:
        event = BuilderEvent(event_type=BuilderEventType.FINALIZED, source=None)

        assert event.data == {}

    def test_recording_observer_satisfies_protocol(self, recorder: RecordingObserver) -> None:
        assert isinstance(recorder, BuilderObserver)


# =============================================================================
# ObservableMixin Tests
# =============================================================================


class TestObservableMixin:
    """Tests for observer registration."""

    def test_add_observer_once(self, recorder: RecordingObserver) -> None:
        observable = ObservableMixin()

        observable.add_observer(recorder)
        observable.add_observer(recorder)

        assert observable.observers == [recorder]

    def test_remove_observer(self, recorder: RecordingObserver) -> None:
        observable = ObservableMixin()
        observable.add_observer(recorder)

        observable.remove_observer(recorder)
        observable.remove_observer(recorder)

        assert observable.observers == []

    def test_clear_observers(self, recorder: RecordingObserver) -> None:
        observable = ObservableMixin()
        observable.add_observer(recorder)
        observable.add_observer(CountingObserver())

        observable.clear_observers()

        assert observable.observers == []

    @pytest.mark.parametrize("builder_cls", [Embed, Field, Footer])
    def test_builders_start_with_own_observer_list(
        self, builder_cls: type, recorder: RecordingObserver
    ) -> None:
        """Test that each builder gets a fresh, unshared observer list."""
        first, second = builder_cls(), builder_cls()

        first.add_observer(recorder)

        assert first.observers == [recorder]
        assert second.observers == []

    def test_observers_returns_copy(self, recorder: RecordingObserver) -> None:
        observable = ObservableMixin()
        observable.add_observer(recorder)

        observable.observers.clear()

        assert len(observable.observers) == 1


# =============================================================================
# Builder integration
# =============================================================================


class TestBuilderEvents:
    """Tests for events emitted by builders."""

    def test_error_added_event(self, recorder: RecordingObserver) -> None:
        embed = Embed()
        embed.add_observer(recorder)

        embed.set_title("t" * 300)

        assert recorder.event_types == [BuilderEventType.ERROR_ADDED]
        assert recorder.events[0].source is embed
        assert isinstance(recorder.events[0].data["error"], LimitExceeded)

    def test_valid_setters_emit_nothing(self, recorder: RecordingObserver) -> None:
        embed = Embed()
        embed.add_observer(recorder)

        embed.set_title("ok").set_color(1).add_field(Field("a", "b"))

        assert recorder.events == []

    def test_absorbed_errors_reported_on_parent(self, recorder: RecordingObserver) -> None:
        """Test that sub-builder errors reach the parent's observers as one event."""
        footer = Footer().set_text("f" * 3000)
        embed = Embed()
        embed.add_observer(recorder)

        embed.set_footer(footer)

        assert recorder.event_types == [BuilderEventType.ERRORS_ABSORBED]
        assert len(recorder.events[0].data["errors"]) == 1

    def test_finalized_event(self, recorder: RecordingObserver) -> None:
        embed = Embed()
        embed.add_observer(recorder)
        embed.set_color(-1)

        raw, _ = embed.finalize()

        assert recorder.event_types == [
            BuilderEventType.ERROR_ADDED,
            BuilderEventType.FINALIZED,
        ]
        assert recorder.events[-1].data == {"raw": raw, "error_count": 1}

    def test_sub_builder_observers(self) -> None:
        counter = CountingObserver()
        field = Field()
        field.add_observer(counter)

        field.set_name("n" * 300)
        Embed().add_field(field)

        assert counter.counts == {
            BuilderEventType.ERROR_ADDED: 1,
            BuilderEventType.FINALIZED: 1,
        }
