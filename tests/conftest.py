"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

import pytest
from hypothesis import strategies as st

from fluent_embed import BuilderEvent, BuilderEventType, Embed, EmbedLimits

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for titles the platform accepts
short_titles = st.text(max_size=256)

# Strategy for titles the platform rejects
long_titles = st.text(min_size=257, max_size=400)

# Strategy for valid embed colours
valid_colors = st.integers(min_value=0, max_value=16777215)

# Strategy for colours outside the 24-bit range
invalid_colors = st.one_of(
    st.integers(max_value=-1),
    st.integers(min_value=16777216),
)


# -----------------------------------------------------------------------------
# Test Observers
# -----------------------------------------------------------------------------


class RecordingObserver:
    """Observer that records all events for testing."""

    def __init__(self) -> None:
        self.events: list[BuilderEvent] = []

    def on_event(self, event: BuilderEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list[BuilderEventType]:
        return [e.event_type for e in self.events]


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def embed() -> Embed:
    """Create a fresh Embed builder."""
    return Embed()


@pytest.fixture
def url_checking_limits() -> EmbedLimits:
    """Default limits with URL checks switched on."""
    return EmbedLimits(check_urls=True)


@pytest.fixture
def recorder() -> RecordingObserver:
    """Create a RecordingObserver instance."""
    return RecordingObserver()
