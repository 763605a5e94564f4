"""Typed theme settings and their translation to matplotlib rcParams.

A :class:`Theme` is a closed set of optional settings. ``None`` means
"not set by this theme", which is what makes overlay merging well defined:
:func:`merge_themes` lets every field set on the right operand win and keeps
everything else from the left operand.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any

from cycler import cycler
from matplotlib.colors import is_color_like
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class LineStyle(StrEnum):
    """Line styles, using matplotlib's named linestyles as values."""

    SOLID = "solid"
    DASHED = "dashed"
    DASHDOT = "dashdot"
    DOTTED = "dotted"


class MarkerShape(StrEnum):
    """Marker shapes, using matplotlib marker codes as values."""

    CIRCLE = "o"
    SQUARE = "s"
    TRIANGLE_UP = "^"
    TRIANGLE_DOWN = "v"
    TRIANGLE_LEFT = "<"
    TRIANGLE_RIGHT = ">"
    DIAMOND = "D"


class FrameStyle(StrEnum):
    """Axes frame styles.

    ``box`` draws all four spines with mirrored ticks, ``semi`` keeps only
    the left and bottom spines, ``none`` hides every spine.
    """

    BOX = "box"
    SEMI = "semi"
    NONE = "none"


class TickDirection(StrEnum):
    """Tick mark directions."""

    IN = "in"
    OUT = "out"
    INOUT = "inout"


class Theme(BaseModel):
    """Visual settings carried by a style. Every field is optional."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Figure
    figure_size: tuple[float, float] | None = Field(
        default=None, description="Figure (width, height) in inches"
    )
    dpi: int | None = Field(default=None, gt=0)

    # Series cycle
    palette: tuple[str, ...] | None = Field(
        default=None, description="Colors assigned to data series in order"
    )
    line_styles: tuple[LineStyle, ...] | None = None
    markers: tuple[MarkerShape, ...] | None = None
    marker_size: float | None = Field(default=None, gt=0)
    show_lines: bool | None = None
    line_width: float | None = Field(default=None, gt=0)

    # Axes
    frame_style: FrameStyle | None = None
    grid: bool | None = None
    grid_style: LineStyle | None = None
    grid_color: str | None = None
    grid_alpha: float | None = Field(default=None, ge=0.0, le=1.0)
    grid_linewidth: float | None = Field(default=None, gt=0)
    minor_ticks: bool | None = None
    tick_direction: TickDirection | None = None

    # Text
    font_family: str | None = None
    font_size: float | None = Field(default=None, gt=0)
    label_font_size: float | None = Field(default=None, gt=0)
    tick_font_size: float | None = Field(default=None, gt=0)
    legend_font_size: float | None = Field(default=None, gt=0)
    title_font_size: float | None = Field(default=None, gt=0)
    legend_frame: bool | None = None
    show_title: bool | None = None

    @field_validator("palette")
    @classmethod
    def validate_palette(cls, v: tuple[str, ...] | None) -> tuple[str, ...] | None:
        if v is None:
            return v
        if not v:
            msg = "palette must contain at least one color"
            raise ValueError(msg)
        for color in v:
            if not is_color_like(color):
                msg = f"palette entry {color!r} is not a valid color"
                raise ValueError(msg)
        return v

    @field_validator("grid_color")
    @classmethod
    def validate_grid_color(cls, v: str | None) -> str | None:
        if v is not None and not is_color_like(v):
            msg = f"grid_color {v!r} is not a valid color"
            raise ValueError(msg)
        return v

    @field_validator("line_styles", "markers")
    @classmethod
    def validate_non_empty(cls, v: tuple[Any, ...] | None) -> tuple[Any, ...] | None:
        if v is not None and not v:
            msg = "cycle sequences must not be empty"
            raise ValueError(msg)
        return v

    def settings(self) -> dict[str, Any]:
        """Return only the fields this theme sets."""
        return self.model_dump(exclude_none=True)


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------


def merge_themes(base: Theme, *overrides: Theme) -> Theme:
    """Overlay *overrides* onto *base*, left to right.

    Every field set on a later theme replaces the value from earlier ones;
    fields a later theme leaves unset keep their earlier value.

    Parameters
    ----------
    base:
        Lowest-priority theme.
    overrides:
        Themes applied on top, in increasing priority.

    Returns
    -------
    A new :class:`Theme`. The inputs are not modified.
    """
    merged = base.settings()
    for override in overrides:
        merged.update(override.settings())
    return Theme.model_validate(merged)


# ---------------------------------------------------------------------------
# matplotlib translation
# ---------------------------------------------------------------------------

_FRAME_SPINES: dict[FrameStyle, dict[str, bool]] = {
    FrameStyle.BOX: {
        "axes.spines.left": True,
        "axes.spines.bottom": True,
        "axes.spines.top": True,
        "axes.spines.right": True,
        "xtick.top": True,
        "ytick.right": True,
    },
    FrameStyle.SEMI: {
        "axes.spines.left": True,
        "axes.spines.bottom": True,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "xtick.top": False,
        "ytick.right": False,
    },
    FrameStyle.NONE: {
        "axes.spines.left": False,
        "axes.spines.bottom": False,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "xtick.top": False,
        "ytick.right": False,
    },
}


def cycle_properties(theme: Theme) -> dict[str, list[str]]:
    """Return the prop-cycle columns of *theme*, padded to equal length.

    Shorter sequences are repeated cyclically up to the longest one, so a
    7-color palette combined with a 6-entry line style list still assigns
    a line style to every color.
    """
    columns: dict[str, list[str]] = {}
    if theme.palette is not None:
        columns["color"] = list(theme.palette)
    if theme.line_styles is not None:
        columns["linestyle"] = [str(ls) for ls in theme.line_styles]
    if theme.markers is not None:
        columns["marker"] = [str(m) for m in theme.markers]
    if not columns:
        return columns

    length = max(len(values) for values in columns.values())
    return {
        key: [values[i % len(values)] for i in range(length)]
        for key, values in columns.items()
    }


def theme_to_rcparams(theme: Theme) -> dict[str, Any]:
    """Translate *theme* into a dict of matplotlib rcParams.

    Only settings present on the theme produce keys. ``show_title`` has no
    rcParams counterpart and is honoured by ``apply_theme`` only.
    """
    rc: dict[str, Any] = {}

    if theme.figure_size is not None:
        rc["figure.figsize"] = list(theme.figure_size)
    if theme.dpi is not None:
        rc["figure.dpi"] = theme.dpi
        rc["savefig.dpi"] = theme.dpi

    columns = cycle_properties(theme)
    if columns:
        rc["axes.prop_cycle"] = cycler(**columns)
    if theme.marker_size is not None:
        rc["lines.markersize"] = theme.marker_size
    if theme.show_lines is not None:
        rc["lines.linestyle"] = "solid" if theme.show_lines else "None"
    if theme.line_width is not None:
        rc["lines.linewidth"] = theme.line_width

    if theme.frame_style is not None:
        rc.update(_FRAME_SPINES[theme.frame_style])
    if theme.grid is not None:
        rc["axes.grid"] = theme.grid
    if theme.grid_style is not None:
        rc["grid.linestyle"] = str(theme.grid_style)
    if theme.grid_color is not None:
        rc["grid.color"] = theme.grid_color
    if theme.grid_alpha is not None:
        rc["grid.alpha"] = theme.grid_alpha
    if theme.grid_linewidth is not None:
        rc["grid.linewidth"] = theme.grid_linewidth
    if theme.minor_ticks is not None:
        rc["xtick.minor.visible"] = theme.minor_ticks
        rc["ytick.minor.visible"] = theme.minor_ticks
    if theme.tick_direction is not None:
        rc["xtick.direction"] = str(theme.tick_direction)
        rc["ytick.direction"] = str(theme.tick_direction)

    if theme.font_family is not None:
        rc["font.family"] = [theme.font_family]
    if theme.font_size is not None:
        rc["font.size"] = theme.font_size
    if theme.label_font_size is not None:
        rc["axes.labelsize"] = theme.label_font_size
    if theme.tick_font_size is not None:
        rc["xtick.labelsize"] = theme.tick_font_size
        rc["ytick.labelsize"] = theme.tick_font_size
    if theme.legend_font_size is not None:
        rc["legend.fontsize"] = theme.legend_font_size
    if theme.title_font_size is not None:
        rc["axes.titlesize"] = theme.title_font_size
    if theme.legend_frame is not None:
        rc["legend.frameon"] = theme.legend_frame

    logger.debug("Translated theme into %d rcParams", len(rc))
    return rc
