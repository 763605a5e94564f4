"""Apply registered styles to matplotlib.

Two touch-points only:

- ``matplotlib.rcParams``, the process-wide defaults changed by
  :func:`use_style` and scoped by :func:`with_style` / :func:`style_context`
- a single ``Figure`` or ``Axes`` changed by :func:`apply_theme`

None of these functions are thread-safe; callers serialize access to
``rcParams`` (normally a single plotting thread).
"""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING, TypeVar

import matplotlib as mpl
from cycler import cycler
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from scienceplt.registry import get_registry
from scienceplt.theme import FrameStyle, Theme, cycle_properties, theme_to_rcparams

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)

T = TypeVar("T")
PlotTarget = TypeVar("PlotTarget", Figure, Axes)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def list_categories() -> list[str]:
    """Return the declared style categories (``combinations`` excluded)."""
    return get_registry().list_categories()


def list_styles(category: str | None = None) -> list[str]:
    """Return sorted style names, optionally filtered by *category*."""
    return get_registry().list_styles(category)


def get_theme(name: str) -> Theme:
    """Return the :class:`Theme` of style *name*.

    Raises
    ------
    StyleNotFoundError
        When *name* is not registered.
    """
    return get_registry().get_theme(name)


# ---------------------------------------------------------------------------
# Global defaults
# ---------------------------------------------------------------------------


def use_style(name: str) -> None:
    """Apply style *name* to matplotlib's global defaults.

    The style is looked up and every rcParam validated before anything is
    written, so a failure leaves ``rcParams`` untouched.

    Raises
    ------
    StyleNotFoundError
        When *name* is not registered.
    """
    theme = get_theme(name)
    validated = mpl.RcParams(theme_to_rcparams(theme))
    mpl.rcParams.update(validated)
    logger.debug("Applied style %s (%d rcParams)", name, len(validated))


@contextlib.contextmanager
def style_context(name: str) -> Iterator[None]:
    """Context manager applying style *name* for the duration of the block.

    A full snapshot of ``rcParams`` is restored on exit, including settings
    changed inside the block by other means than :func:`use_style`.

    Example::

        with style_context("science+ieee"):
            fig, ax = plt.subplots()
    """
    with mpl.rc_context():
        use_style(name)
        yield


def with_style(name: str, body: Callable[[], T]) -> T:
    """Call *body* with style *name* applied and return its result.

    Global defaults are restored whether *body* returns, *body* raises, or
    the style lookup fails. Exceptions propagate after restoration.
    """
    with style_context(name):
        return body()


# ---------------------------------------------------------------------------
# Single plot
# ---------------------------------------------------------------------------


def apply_theme(target: PlotTarget, name: str) -> PlotTarget:
    """Apply style *name* to one existing ``Figure`` or ``Axes``.

    A figure receives its size and DPI and passes the remaining settings to
    each of its axes. ``rcParams`` is not modified.

    Returns
    -------
    The same *target* object.

    Raises
    ------
    StyleNotFoundError
        When *name* is not registered.
    """
    theme = get_theme(name)
    if isinstance(target, Figure):
        _apply_to_figure(target, theme)
        for ax in target.axes:
            _apply_to_axes(ax, theme)
    else:
        _apply_to_axes(target, theme)
    logger.debug("Applied style %s to %s", name, type(target).__name__)
    return target


def _apply_to_figure(fig: Figure, theme: Theme) -> None:
    if theme.figure_size is not None:
        fig.set_size_inches(*theme.figure_size)
    if theme.dpi is not None:
        fig.set_dpi(theme.dpi)


def _apply_to_axes(ax: Axes, theme: Theme) -> None:
    columns = cycle_properties(theme)
    if columns:
        ax.set_prop_cycle(cycler(**columns))
        _restyle_lines(ax, columns)

    for line in ax.get_lines():
        if theme.line_width is not None:
            line.set_linewidth(theme.line_width)
        if theme.marker_size is not None:
            line.set_markersize(theme.marker_size)
        if theme.show_lines is False:
            line.set_linestyle("None")

    if theme.frame_style is not None:
        _apply_frame(ax, theme.frame_style)

    if theme.grid is not None:
        grid_kwargs = {}
        if theme.grid:
            if theme.grid_style is not None:
                grid_kwargs["linestyle"] = str(theme.grid_style)
            if theme.grid_color is not None:
                grid_kwargs["color"] = theme.grid_color
            if theme.grid_alpha is not None:
                grid_kwargs["alpha"] = theme.grid_alpha
            if theme.grid_linewidth is not None:
                grid_kwargs["linewidth"] = theme.grid_linewidth
        ax.grid(theme.grid, **grid_kwargs)

    if theme.minor_ticks is True:
        ax.minorticks_on()
    elif theme.minor_ticks is False:
        ax.minorticks_off()
    if theme.tick_direction is not None:
        ax.tick_params(which="both", direction=str(theme.tick_direction))
    if theme.tick_font_size is not None:
        ax.tick_params(which="major", labelsize=theme.tick_font_size)

    _apply_text(ax, theme)


def _restyle_lines(ax: Axes, columns: dict[str, list[str]]) -> None:
    """Re-assign cycle properties to lines already drawn on *ax*."""
    length = len(next(iter(columns.values())))
    for i, line in enumerate(ax.get_lines()):
        props = {key: values[i % length] for key, values in columns.items()}
        if "color" in props:
            line.set_color(props["color"])
        if "linestyle" in props:
            line.set_linestyle(props["linestyle"])
        if "marker" in props:
            line.set_marker(props["marker"])


def _apply_frame(ax: Axes, frame_style: FrameStyle) -> None:
    visible = {
        FrameStyle.BOX: {"left", "bottom", "top", "right"},
        FrameStyle.SEMI: {"left", "bottom"},
        FrameStyle.NONE: set(),
    }[frame_style]
    for side, spine in ax.spines.items():
        spine.set_visible(side in visible)
    mirrored = frame_style is FrameStyle.BOX
    ax.tick_params(which="both", top=mirrored, right=mirrored)


def _apply_text(ax: Axes, theme: Theme) -> None:
    texts = [ax.title, ax.xaxis.label, ax.yaxis.label]
    texts.extend(ax.get_xticklabels())
    texts.extend(ax.get_yticklabels())
    legend = ax.get_legend()
    if legend is not None:
        texts.extend(legend.get_texts())

    if theme.font_family is not None:
        for text in texts:
            text.set_fontfamily(theme.font_family)
    if theme.label_font_size is not None:
        ax.xaxis.label.set_fontsize(theme.label_font_size)
        ax.yaxis.label.set_fontsize(theme.label_font_size)
    if theme.title_font_size is not None:
        ax.title.set_fontsize(theme.title_font_size)
    if theme.show_title is False:
        ax.set_title("")

    if legend is not None:
        if theme.legend_font_size is not None:
            for text in legend.get_texts():
                text.set_fontsize(theme.legend_font_size)
        if theme.legend_frame is not None:
            legend.set_frame_on(theme.legend_frame)
