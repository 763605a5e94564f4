"""Tests for the discrete rainbow and fallback palette generator."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from matplotlib.colors import is_color_like

from scienceplt.exceptions import InvalidCountError
from scienceplt.palettes import (
    DEEP_RED,
    MID_BLUE,
    RAINBOW_REFERENCE,
    distinguishable_colors,
    rainbow_colors,
    rainbow_indices,
)

# ---------------------------------------------------------------------------
# T1: Reference palette
# ---------------------------------------------------------------------------


class TestRainbowReference:
    """Tests for the 23-color reference sequence."""

    def test_reference_has_23_colors(self) -> None:
        assert len(RAINBOW_REFERENCE) == 23

    def test_reference_colors_unique(self) -> None:
        assert len(set(RAINBOW_REFERENCE)) == 23

    def test_endpoint_colors_are_in_reference(self) -> None:
        """The curated endpoints are reference entries."""
        assert MID_BLUE in RAINBOW_REFERENCE
        assert DEEP_RED in RAINBOW_REFERENCE


# ---------------------------------------------------------------------------
# T2: Curated small counts
# ---------------------------------------------------------------------------


class TestCuratedCounts:
    """Tests for the hand-picked subsets (n = 1..5)."""

    def test_one_color_is_mid_blue(self) -> None:
        assert rainbow_colors(1) == ("#1965B0",)

    def test_two_colors_are_blue_and_red(self) -> None:
        assert rainbow_colors(2) == ("#1965B0", "#DC050C")

    def test_three_colors_add_pale_yellow(self) -> None:
        assert rainbow_colors(3) == ("#1965B0", "#F7F056", "#DC050C")

    def test_four_colors_add_green(self) -> None:
        assert rainbow_colors(4) == ("#1965B0", "#4EB265", "#F7F056", "#DC050C")

    def test_five_colors_add_light_blue(self) -> None:
        assert rainbow_colors(5) == (
            "#1965B0",
            "#7BAFDE",
            "#4EB265",
            "#F7F056",
            "#DC050C",
        )

    def test_endpoints_reused_across_sizes(self) -> None:
        """First and last colors of n=5 match n=1 and the end of n=2."""
        five = rainbow_colors(5)
        assert len(five) == 5
        assert five[0] == rainbow_colors(1)[0]
        assert five[-1] == rainbow_colors(2)[1]


# ---------------------------------------------------------------------------
# T3: Evenly spaced counts
# ---------------------------------------------------------------------------


class TestEvenlySpaced:
    """Tests for n = 6..23."""

    def test_six_color_indices(self) -> None:
        assert rainbow_indices(6) == [0, 4, 9, 13, 18, 22]

    def test_ties_round_half_up(self) -> None:
        """Position 5.5 (n=9, k=2) selects index 6, 16.5 selects 17."""
        indices = rainbow_indices(9)
        assert indices[2] == 6
        assert indices[6] == 17

    def test_full_count_returns_reference(self) -> None:
        assert rainbow_colors(23) == RAINBOW_REFERENCE

    def test_six_colors_match_indices(self) -> None:
        expected = tuple(RAINBOW_REFERENCE[i] for i in (0, 4, 9, 13, 18, 22))
        assert rainbow_colors(6) == expected

    @pytest.mark.parametrize("n", range(1, 24))
    def test_length_matches_request(self, n: int) -> None:
        assert len(rainbow_colors(n)) == n

    @pytest.mark.parametrize("n", range(1, 24))
    def test_deterministic(self, n: int) -> None:
        assert rainbow_colors(n) == rainbow_colors(n)


class TestRainbowProperties:
    """Property-based tests for index selection."""

    @given(n=st.integers(min_value=6, max_value=23))
    @settings(deadline=None)
    def test_indices_span_reference(self, n: int) -> None:
        """Indices start at 0, end at 22 and strictly increase."""
        indices = rainbow_indices(n)
        assert indices[0] == 0
        assert indices[-1] == 22
        assert all(a < b for a, b in zip(indices, indices[1:]))

    @given(n=st.integers(min_value=1, max_value=23))
    @settings(deadline=None)
    def test_colors_distinct(self, n: int) -> None:
        colors = rainbow_colors(n)
        assert len(set(colors)) == n


# ---------------------------------------------------------------------------
# T4: Invalid counts
# ---------------------------------------------------------------------------


class TestInvalidCounts:
    """Tests for rejected palette sizes."""

    @pytest.mark.parametrize("n", [0, -1, -23])
    def test_non_positive_raises(self, n: int) -> None:
        with pytest.raises(InvalidCountError):
            rainbow_colors(n)

    @pytest.mark.parametrize("n", [2.5, "3", True, None])
    def test_non_integer_raises(self, n: object) -> None:
        with pytest.raises(InvalidCountError):
            rainbow_colors(n)  # type: ignore[arg-type]

    def test_invalid_count_is_value_error(self) -> None:
        """Callers catching ValueError also see InvalidCountError."""
        with pytest.raises(ValueError, match=">= 1"):
            rainbow_colors(0)


# ---------------------------------------------------------------------------
# T5: Fallback generator
# ---------------------------------------------------------------------------


class TestDistinguishableColors:
    """Tests for counts beyond the reference size."""

    def test_large_count_length(self) -> None:
        assert len(rainbow_colors(30)) == 30

    def test_large_count_starts_with_endpoints(self) -> None:
        colors = rainbow_colors(30)
        assert colors[:2] == (MID_BLUE, DEEP_RED)

    def test_large_count_distinct(self) -> None:
        colors = rainbow_colors(40)
        assert len(set(colors)) == 40

    def test_large_count_deterministic(self) -> None:
        assert rainbow_colors(24) == rainbow_colors(24)

    def test_colors_are_valid_hex(self) -> None:
        for color in rainbow_colors(26):
            assert is_color_like(color)
            assert color.startswith("#")
            assert len(color) == 7

    def test_seeds_only(self) -> None:
        """A request no larger than the seed list returns the seeds."""
        assert distinguishable_colors(1, seeds=(MID_BLUE, DEEP_RED)) == (MID_BLUE,)

    def test_without_seeds(self) -> None:
        colors = distinguishable_colors(5)
        assert len(colors) == 5
        assert len(set(colors)) == 5

    def test_zero_raises(self) -> None:
        with pytest.raises(InvalidCountError):
            distinguishable_colors(0)
