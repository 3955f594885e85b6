"""Tests for error values and the shared checks."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fluent_embed import (
    EMBED_TYPES,
    BuildError,
    BuilderFinalized,
    CollectionLimitReached,
    InvalidEnumValue,
    InvalidURL,
    LimitExceeded,
    ValueOutOfRange,
)
from fluent_embed.checks import check_length, check_range, check_url

# =============================================================================
# Error messages
# =============================================================================


class TestErrorMessages:
    """Tests for the human-readable messages."""

    def test_limit_exceeded_with_value(self) -> None:
        error = LimitExceeded("embed title", 256, 300, "abc")

        assert error.message == (
            "embed title has a character limit of 256, "
            "but the given text has a length of 300: abc"
        )
        assert str(error) == error.message

    def test_limit_exceeded_without_value(self) -> None:
        error = LimitExceeded("embed description", 2048, 2049)

        assert error.message.endswith("a length of 2049")

    def test_value_out_of_range(self) -> None:
        assert (
            ValueOutOfRange("embed color", -1, 0, 16777216).message
            == "embed color must be between 0 and 16777216, got -1"
        )

    def test_value_out_of_range_unbounded(self) -> None:
        assert (
            ValueOutOfRange("embed image height", -3, 0).message
            == "embed image height must be at least 0, got -3"
        )

    def test_collection_limit_reached(self) -> None:
        assert "'Wins'" in CollectionLimitReached("Wins", 25).message
        assert "25" in CollectionLimitReached("Wins", 25).message

    def test_invalid_enum_lists_options(self) -> None:
        message = InvalidEnumValue("bogus").message

        assert "'bogus'" in message
        for t in EMBED_TYPES:
            assert t in message

    def test_invalid_url(self) -> None:
        assert InvalidURL("embed url", "nope").message == "embed url is not a valid URL: nope"

    def test_builder_finalized(self) -> None:
        assert BuilderFinalized("embed").message == "embed builder has already been finalized"

    @pytest.mark.parametrize(
        "error",
        [
            LimitExceeded("k", 1, 2),
            ValueOutOfRange("k", 1, 2, 3),
            CollectionLimitReached("k", 1),
            InvalidEnumValue("k"),
            InvalidURL("k", "v"),
            BuilderFinalized("k"),
        ],
    )
    def test_errors_are_frozen_build_errors(self, error: BuildError) -> None:
        assert isinstance(error, BuildError)
        assert not isinstance(error, Exception)
        with pytest.raises(dataclasses.FrozenInstanceError):
            error.kind = "other"  # type: ignore[misc]

    def test_errors_are_hashable(self) -> None:
        errors = {BuilderFinalized("embed"), BuilderFinalized("embed")}

        assert len(errors) == 1


# =============================================================================
# Checks
# =============================================================================


class TestChecks:
    """Tests for check_length, check_range and check_url."""

    @given(text=st.text(max_size=30), limit=st.integers(min_value=0, max_value=30))
    @settings(max_examples=100)
    def test_check_length(self, text: str, limit: int) -> None:
        """Property: an error is returned iff the text is longer than the limit."""
        error = check_length("k", text, limit)

        if len(text) <= limit:
            assert error is None
        else:
            assert error == LimitExceeded("k", limit, len(text), text)

    def test_check_length_without_echo(self) -> None:
        assert check_length("k", "abc", 2, echo=False) == LimitExceeded("k", 2, 3)

    @given(value=st.integers(), lower=st.integers(), span=st.integers(min_value=0, max_value=100))
    @settings(max_examples=100)
    def test_check_range(self, value: int, lower: int, span: int) -> None:
        """Property: an error is returned iff value is outside [lower, upper)."""
        upper = lower + span
        error = check_range("k", value, lower, upper)

        assert (error is None) == (lower <= value < upper)

    def test_check_range_unbounded(self) -> None:
        assert check_range("k", 10**12, 0) is None
        assert check_range("k", -1, 0) == ValueOutOfRange("k", -1, 0, None)

    @pytest.mark.parametrize(
        "url",
        ["https://example.com", "http://example.com/a/b?c=d", "https://cdn.example.com/x.png"],
    )
    def test_check_url_accepts(self, url: str) -> None:
        assert check_url("k", url) is None

    @pytest.mark.parametrize("url", ["", "example", "ftp://example.com", "attachment://x.png"])
    def test_check_url_rejects(self, url: str) -> None:
        assert check_url("k", url) == InvalidURL("k", url)

    def test_check_url_attachment(self) -> None:
        assert check_url("k", "attachment://x.png", allow_attachment=True) is None
        assert check_url("k", "attachment://", allow_attachment=True) == InvalidURL(
            "k", "attachment://"
        )
