"""Tests for the Theme model, overlay merging and rcParams translation."""

from __future__ import annotations

import matplotlib as mpl
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from scienceplt.palettes import HIGH_VIS, IEEE, STD_COLORS
from scienceplt.registry import get_registry, science_theme
from scienceplt.theme import (
    FrameStyle,
    LineStyle,
    MarkerShape,
    Theme,
    TickDirection,
    cycle_properties,
    merge_themes,
    theme_to_rcparams,
)

# ---------------------------------------------------------------------------
# T1: Model validation
# ---------------------------------------------------------------------------


class TestThemeModel:
    """Tests for Theme field validation and immutability."""

    def test_empty_theme_sets_nothing(self) -> None:
        assert Theme().settings() == {}

    def test_settings_excludes_unset_fields(self) -> None:
        theme = Theme(font_family="serif", grid=False)
        assert theme.settings() == {"font_family": "serif", "grid": False}

    def test_theme_is_frozen(self) -> None:
        theme = Theme(font_family="serif")
        with pytest.raises(ValidationError):
            theme.font_family = "sans-serif"  # type: ignore[misc]

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Theme(fontfamily="serif")  # type: ignore[call-arg]

    def test_invalid_palette_color_rejected(self) -> None:
        with pytest.raises(ValidationError, match="not a valid color"):
            Theme(palette=("#0C5DA5", "not-a-color"))

    def test_empty_palette_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Theme(palette=())

    def test_grid_alpha_bounds(self) -> None:
        with pytest.raises(ValidationError):
            Theme(grid_alpha=1.5)

    def test_enum_fields_accept_strings(self) -> None:
        """YAML-style string values are coerced into enums."""
        theme = Theme.model_validate(
            {
                "line_styles": ["solid", "dashed"],
                "markers": ["o", "s"],
                "frame_style": "semi",
                "tick_direction": "out",
            }
        )
        assert theme.line_styles == (LineStyle.SOLID, LineStyle.DASHED)
        assert theme.markers == (MarkerShape.CIRCLE, MarkerShape.SQUARE)
        assert theme.frame_style is FrameStyle.SEMI
        assert theme.tick_direction is TickDirection.OUT


# ---------------------------------------------------------------------------
# T2: Merge
# ---------------------------------------------------------------------------


class TestMergeThemes:
    """Tests for right-wins overlay merging."""

    def test_right_operand_wins(self) -> None:
        merged = merge_themes(Theme(font_family="serif"), Theme(font_family="sans-serif"))
        assert merged.font_family == "sans-serif"

    def test_left_only_fields_preserved(self) -> None:
        merged = merge_themes(Theme(font_family="serif", grid=False), Theme(dpi=600))
        assert merged.font_family == "serif"
        assert merged.grid is False
        assert merged.dpi == 600

    def test_unset_fields_do_not_override(self) -> None:
        merged = merge_themes(Theme(grid=True), Theme())
        assert merged.grid is True

    def test_false_overrides_true(self) -> None:
        """False is a set value, unlike None."""
        merged = merge_themes(Theme(grid=True), Theme(grid=False))
        assert merged.grid is False

    def test_multiple_overrides_left_to_right(self) -> None:
        merged = merge_themes(
            Theme(dpi=100, font_family="serif"),
            Theme(dpi=300),
            Theme(dpi=600, grid=True),
        )
        assert merged.dpi == 600
        assert merged.font_family == "serif"
        assert merged.grid is True

    def test_inputs_not_modified(self) -> None:
        base = science_theme()
        before = base.settings()
        merge_themes(base, Theme(palette=IEEE))
        assert base.settings() == before

    def test_science_ieee_overlay(self) -> None:
        """science+ieee equals science overlaid by every ieee key."""
        registry = get_registry()
        science = registry.get_theme("science").settings()
        ieee = registry.get_theme("ieee").settings()
        combined = registry.get_theme("science+ieee").settings()

        assert combined == {**science, **ieee}
        for key, value in ieee.items():
            assert combined[key] == value
        for key in science.keys() - ieee.keys():
            assert combined[key] == science[key]

    @given(
        left=st.sampled_from([None, 1.0, 2.0]),
        right=st.sampled_from([None, 3.0, 4.0]),
    )
    @settings(deadline=None)
    def test_merge_property(self, left: float | None, right: float | None) -> None:
        """The result holds right when set, otherwise left."""
        merged = merge_themes(Theme(line_width=left), Theme(line_width=right))
        assert merged.line_width == (right if right is not None else left)


# ---------------------------------------------------------------------------
# T3: rcParams translation
# ---------------------------------------------------------------------------


class TestThemeToRcParams:
    """Tests for translating themes into matplotlib rcParams."""

    def test_science_rcparams(self) -> None:
        rc = theme_to_rcparams(science_theme())
        assert rc["figure.figsize"] == [3.5, 2.625]
        assert rc["font.family"] == ["serif"]
        assert rc["xtick.direction"] == "in"
        assert rc["ytick.direction"] == "in"
        assert rc["xtick.minor.visible"] is True
        assert rc["axes.grid"] is False
        assert rc["axes.spines.top"] is True
        assert rc["xtick.top"] is True
        assert rc["axes.labelsize"] == 10
        assert rc["xtick.labelsize"] == 8

    def test_palette_becomes_prop_cycle(self) -> None:
        rc = theme_to_rcparams(Theme(palette=STD_COLORS))
        assert rc["axes.prop_cycle"].by_key()["color"] == list(STD_COLORS)

    def test_empty_theme_produces_no_rcparams(self) -> None:
        assert theme_to_rcparams(Theme()) == {}

    def test_hidden_lines(self) -> None:
        rc = theme_to_rcparams(Theme(show_lines=False))
        assert rc["lines.linestyle"] == "None"

    def test_dpi_sets_figure_and_savefig(self) -> None:
        rc = theme_to_rcparams(Theme(dpi=600))
        assert rc["figure.dpi"] == 600
        assert rc["savefig.dpi"] == 600

    def test_semi_frame_hides_top_and_right(self) -> None:
        rc = theme_to_rcparams(Theme(frame_style=FrameStyle.SEMI))
        assert rc["axes.spines.top"] is False
        assert rc["axes.spines.right"] is False
        assert rc["axes.spines.left"] is True

    def test_every_registered_style_is_valid_rcparams(self) -> None:
        """matplotlib's validators accept the translation of every style."""
        registry = get_registry()
        for name in registry.list_styles():
            rc = theme_to_rcparams(registry.get_theme(name))
            mpl.RcParams(rc)


class TestCycleProperties:
    """Tests for prop-cycle column padding."""

    def test_no_sequences(self) -> None:
        assert cycle_properties(Theme(dpi=100)) == {}

    def test_equal_lengths_unchanged(self) -> None:
        columns = cycle_properties(
            Theme(palette=HIGH_VIS, line_styles=(LineStyle.SOLID,) * 6)
        )
        assert columns["color"] == list(HIGH_VIS)
        assert len(columns["linestyle"]) == 6

    def test_shorter_sequence_repeats(self) -> None:
        """A 6-entry line style list is cycled to match 7 colors."""
        styles = (
            LineStyle.SOLID,
            LineStyle.DASHED,
            LineStyle.DASHDOT,
            LineStyle.DOTTED,
            LineStyle.SOLID,
            LineStyle.DASHED,
        )
        columns = cycle_properties(Theme(palette=STD_COLORS, line_styles=styles))
        assert len(columns["color"]) == 7
        assert len(columns["linestyle"]) == 7
        assert columns["linestyle"][6] == "solid"

    def test_markers_use_matplotlib_codes(self) -> None:
        columns = cycle_properties(
            Theme(markers=(MarkerShape.CIRCLE, MarkerShape.DIAMOND))
        )
        assert columns["marker"] == ["o", "D"]
