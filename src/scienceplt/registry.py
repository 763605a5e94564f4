"""Registry of named style presets.

The registry is filled by a fixed sequence of registration steps and then
frozen. Combination styles merge entries registered by earlier steps, so
the order is significant::

    base -> color -> journals -> misc -> languages -> combinations -> user

The process-wide registry is built on first use by :func:`get_registry`
(or explicitly by :func:`initialize`) and is read-only afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from scienceplt import palettes
from scienceplt.config.defaults import RAINBOW_REFERENCE_SIZE
from scienceplt.config.settings import DuplicatePolicy, StyleSettings
from scienceplt.exceptions import (
    DuplicateNameError,
    RegistryFrozenError,
    StyleConfigError,
    StyleNotFoundError,
)
from scienceplt.theme import (
    FrameStyle,
    LineStyle,
    MarkerShape,
    Theme,
    TickDirection,
    merge_themes,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)


class StyleCategory(StrEnum):
    """Coarse grouping tag for styles."""

    SCIENCE = "science"
    JOURNALS = "journals"
    COLOR = "color"
    LANGUAGES = "languages"
    MISC = "misc"
    COMBINATIONS = "combinations"


# Declared categories; ``combinations`` only tags merged entries
BASE_CATEGORIES: tuple[StyleCategory, ...] = (
    StyleCategory.SCIENCE,
    StyleCategory.JOURNALS,
    StyleCategory.COLOR,
    StyleCategory.LANGUAGES,
    StyleCategory.MISC,
)

# Color schemes combined with ``science`` (rainbow variants excluded)
COMBINED_COLOR_STYLES: tuple[str, ...] = (
    "bright",
    "vibrant",
    "muted",
    "high-vis",
    "retro",
    "high-contrast",
    "scatter",
)


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StyleEntry:
    """Immutable definition of a single named style.

    Attributes
    ----------
    name:
        Unique, case-sensitive identifier (e.g. ``"science+ieee"``).
    category:
        Grouping tag.
    description:
        Human-readable summary, informational only.
    theme:
        Settings applied by the style.
    """

    name: str
    category: StyleCategory
    description: str
    theme: Theme


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class StyleRegistry:
    """Mapping from style name to :class:`StyleEntry`.

    Append-only until :meth:`freeze` is called, read-only afterwards.

    Parameters
    ----------
    duplicate_policy:
        ``error`` raises :class:`DuplicateNameError` on a repeated name,
        ``overwrite`` replaces the existing entry.
    """

    def __init__(
        self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.ERROR
    ) -> None:
        self._entries: dict[str, StyleEntry] = {}
        self._duplicate_policy = duplicate_policy
        self._frozen = False

    # ------------------------------------------------------------------
    # Mutation (initialization only)
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        category: StyleCategory | str,
        description: str,
        theme: Theme,
    ) -> StyleEntry:
        """Insert a style and return its entry.

        Raises
        ------
        RegistryFrozenError
            When the registry has been frozen.
        DuplicateNameError
            When *name* exists and the policy is ``error``.
        """
        if self._frozen:
            msg = f"Cannot register {name!r}: style registry is frozen"
            raise RegistryFrozenError(msg)
        if name in self._entries:
            if self._duplicate_policy is DuplicatePolicy.ERROR:
                raise DuplicateNameError(name)
            logger.warning("Overwriting existing style: %s", name)

        entry = StyleEntry(
            name=name,
            category=StyleCategory(category),
            description=description,
            theme=theme,
        )
        self._entries[name] = entry
        return entry

    def register_combination(
        self, name: str, parts: list[str], description: str
    ) -> StyleEntry:
        """Register *name* as the overlay of registered styles *parts*.

        The first part has the lowest priority; each later part overrides
        the settings it defines.
        """
        themes = [self.get_theme(part) for part in parts]
        return self.register(
            name,
            StyleCategory.COMBINATIONS,
            description,
            merge_themes(themes[0], *themes[1:]),
        )

    def freeze(self) -> None:
        """End initialization. Later :meth:`register` calls fail."""
        self._frozen = True
        logger.debug("Style registry frozen with %d styles", len(self))

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def entries(self) -> Mapping[str, StyleEntry]:
        """Read-only view of all entries keyed by name."""
        return MappingProxyType(self._entries)

    def get(self, name: str) -> StyleEntry:
        """Return the :class:`StyleEntry` for *name*.

        Raises
        ------
        StyleNotFoundError
            When *name* is not registered.
        """
        try:
            return self._entries[name]
        except KeyError:
            raise StyleNotFoundError(name, self._entries.keys()) from None

    def get_theme(self, name: str) -> Theme:
        """Return the :class:`Theme` registered under *name*."""
        return self.get(name).theme

    def list_styles(self, category: StyleCategory | str | None = None) -> list[str]:
        """Return sorted style names, optionally only those in *category*."""
        if category is None:
            return sorted(self._entries)
        return sorted(
            name for name, entry in self._entries.items() if entry.category == category
        )

    @staticmethod
    def list_categories() -> list[str]:
        """Return the declared categories, excluding ``combinations``."""
        return [str(category) for category in BASE_CATEGORIES]

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __repr__(self) -> str:  # pragma: no cover
        state = "frozen" if self._frozen else "open"
        return f"StyleRegistry({len(self)} styles, {state})"


# ---------------------------------------------------------------------------
# Built-in registration steps
# ---------------------------------------------------------------------------


def science_theme() -> Theme:
    """Base settings for publication-quality plots."""
    return Theme(
        figure_size=(3.5, 2.625),
        palette=palettes.STD_COLORS,
        frame_style=FrameStyle.BOX,
        grid=False,
        minor_ticks=True,
        tick_direction=TickDirection.IN,
        label_font_size=10,
        tick_font_size=8,
        legend_font_size=8,
        line_width=1.0,
        font_family="serif",
        show_title=False,
    )


def register_base_styles(registry: StyleRegistry) -> None:
    registry.register(
        "science",
        StyleCategory.SCIENCE,
        "Base scientific style for publication-quality plots",
        science_theme(),
    )


def register_color_styles(registry: StyleRegistry) -> None:
    """Register Paul Tol's schemes, extra schemes and the discrete rainbows."""
    schemes: list[tuple[str, str, tuple[str, ...]]] = [
        ("bright", "Bright color scheme (color-blind safe)", palettes.BRIGHT),
        ("vibrant", "Vibrant color scheme (color-blind safe)", palettes.VIBRANT),
        ("muted", "Muted color scheme (color-blind safe)", palettes.MUTED),
        ("light", "Light color scheme (color-blind safe)", palettes.LIGHT),
        (
            "high-contrast",
            "High-contrast color scheme (color-blind safe)",
            palettes.HIGH_CONTRAST,
        ),
        ("retro", "Retro color scheme", palettes.RETRO),
    ]
    for name, description, palette in schemes:
        registry.register(name, StyleCategory.COLOR, description, Theme(palette=palette))

    registry.register(
        "high-vis",
        StyleCategory.COLOR,
        "High visibility color scheme",
        Theme(
            palette=palettes.HIGH_VIS,
            line_styles=(
                LineStyle.SOLID,
                LineStyle.DASHED,
                LineStyle.DASHDOT,
                LineStyle.DOTTED,
                LineStyle.SOLID,
                LineStyle.DASHED,
            ),
        ),
    )

    for n in range(1, RAINBOW_REFERENCE_SIZE + 1):
        registry.register(
            f"discrete-rainbow-{n}",
            StyleCategory.COLOR,
            f"Discrete rainbow color scheme with {n} colors",
            Theme(palette=palettes.rainbow_colors(n)),
        )

    registry.register(
        "scatter",
        StyleCategory.COLOR,
        "Style for scatter plots",
        Theme(
            markers=(
                MarkerShape.CIRCLE,
                MarkerShape.SQUARE,
                MarkerShape.TRIANGLE_UP,
                MarkerShape.TRIANGLE_DOWN,
                MarkerShape.TRIANGLE_LEFT,
                MarkerShape.TRIANGLE_RIGHT,
                MarkerShape.DIAMOND,
            ),
            marker_size=3,
            palette=palettes.STD_COLORS,
            show_lines=False,
        ),
    )


def register_journal_styles(registry: StyleRegistry) -> None:
    registry.register(
        "ieee",
        StyleCategory.JOURNALS,
        "IEEE journal style",
        Theme(figure_size=(3.3, 2.5), dpi=600, palette=palettes.IEEE),
    )
    registry.register(
        "nature",
        StyleCategory.JOURNALS,
        "Nature journal style",
        Theme(
            figure_size=(3.3, 2.5),
            font_family="sans-serif",
            font_size=7,
            label_font_size=7,
            tick_font_size=7,
            legend_font_size=7,
            title_font_size=7,
            line_width=1.0,
            frame_style=FrameStyle.BOX,
        ),
    )


def register_misc_styles(registry: StyleRegistry) -> None:
    registry.register(
        "grid",
        StyleCategory.MISC,
        "Grid lines and legend frame",
        Theme(
            grid=True,
            grid_style=LineStyle.DASHED,
            grid_color="black",
            grid_alpha=0.5,
            grid_linewidth=0.5,
            legend_frame=True,
        ),
    )
    registry.register(
        "notebook",
        StyleCategory.MISC,
        "Style for Jupyter notebooks",
        Theme(
            figure_size=(8.0, 6.0),
            tick_font_size=16,
            label_font_size=16,
            legend_font_size=16,
            title_font_size=16,
            line_width=2.0,
            frame_style=FrameStyle.BOX,
            font_family="sans-serif",
        ),
    )
    registry.register(
        "no-latex",
        StyleCategory.MISC,
        "Style without LaTeX rendering",
        Theme(font_family="serif"),
    )
    registry.register(
        "sans",
        StyleCategory.MISC,
        "Style with sans-serif fonts",
        Theme(font_family="sans-serif"),
    )


_LANGUAGE_FONTS: tuple[tuple[str, str, str], ...] = (
    ("cjk-tc-font", "Traditional Chinese", "Noto Serif CJK TC"),
    ("cjk-sc-font", "Simplified Chinese", "Noto Serif CJK SC"),
    ("cjk-jp-font", "Japanese", "Noto Serif CJK JP"),
    ("cjk-kr-font", "Korean", "Noto Serif CJK KR"),
    ("russian-font", "Russian", "serif"),
    ("turkish-font", "Turkish", "serif"),
)


def register_language_styles(registry: StyleRegistry) -> None:
    for name, language, family in _LANGUAGE_FONTS:
        registry.register(
            name,
            StyleCategory.LANGUAGES,
            f"Font support for {language}",
            Theme(font_family=family),
        )


def register_combination_styles(registry: StyleRegistry) -> None:
    """Register ``science+<style>`` overlays of already registered styles."""
    registry.register_combination(
        "science+ieee", ["science", "ieee"], "Science style with IEEE specifics"
    )
    registry.register_combination(
        "science+nature",
        ["science", "nature"],
        "Science style with Nature journal specifics",
    )
    registry.register_combination(
        "science+grid", ["science", "grid"], "Science style with grid lines"
    )
    for color_style in COMBINED_COLOR_STYLES:
        registry.register_combination(
            f"science+{color_style}",
            ["science", color_style],
            f"Science style with {color_style} color scheme",
        )


# ---------------------------------------------------------------------------
# User styles (YAML)
# ---------------------------------------------------------------------------


def load_user_styles(registry: StyleRegistry, yaml_path: Path) -> list[str]:
    """Register styles defined in *yaml_path* and return their names.

    The file holds a top-level ``styles`` list. Each entry needs a ``name``
    and may give ``category`` (default ``misc``), ``description``, a
    ``theme`` mapping of :class:`Theme` fields and ``extends``, a list of
    registered styles overlaid underneath ``theme``. Entries with
    ``extends`` are tagged ``combinations``.

    Raises
    ------
    StyleConfigError
        When the file is missing, malformed or defines an invalid theme.
    """
    if not yaml_path.exists():
        msg = f"User style YAML not found: {yaml_path}"
        raise StyleConfigError(msg)

    with yaml_path.open(encoding="utf-8") as fh:
        try:
            data: Any = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            msg = f"User style YAML at {yaml_path} could not be parsed: {exc}"
            raise StyleConfigError(msg) from exc

    if not isinstance(data, dict) or not isinstance(data.get("styles"), list):
        msg = f"User style YAML at {yaml_path} must contain a top-level 'styles' list"
        raise StyleConfigError(msg)

    names: list[str] = []
    for entry in data["styles"]:
        _validate_entry(entry, yaml_path)
        name = str(entry["name"])
        description = str(entry.get("description", f"User style {name}"))
        try:
            theme = Theme.model_validate(entry.get("theme") or {})
        except ValidationError as exc:
            msg = f"Style {name!r} in {yaml_path} has an invalid theme: {exc}"
            raise StyleConfigError(msg) from exc

        extends = [str(part) for part in entry.get("extends") or []]
        if extends:
            bases = [registry.get_theme(part) for part in extends]
            registry.register(
                name,
                StyleCategory.COMBINATIONS,
                description,
                merge_themes(bases[0], *bases[1:], theme),
            )
        else:
            registry.register(name, entry.get("category", "misc"), description, theme)
        names.append(name)

    logger.debug("Loaded %d user styles from %s", len(names), yaml_path)
    return names


def _validate_entry(entry: Any, source: Path) -> None:
    """Raise :exc:`StyleConfigError` when a user style entry is malformed."""
    if not isinstance(entry, dict) or "name" not in entry:
        msg = f"Style entry in {source} is missing required field 'name': {entry}"
        raise StyleConfigError(msg)

    category = entry.get("category", "misc")
    if category not in {str(c) for c in StyleCategory}:
        msg = (
            f"Style {entry['name']!r} in {source} has invalid category "
            f"{category!r}. Must be one of {[str(c) for c in StyleCategory]}."
        )
        raise StyleConfigError(msg)

    extends = entry.get("extends")
    if extends is not None and not isinstance(extends, list):
        msg = f"Style {entry['name']!r} in {source}: 'extends' must be a list"
        raise StyleConfigError(msg)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def build_registry(settings: StyleSettings | None = None) -> StyleRegistry:
    """Build and freeze a registry holding every built-in style.

    Parameters
    ----------
    settings:
        Registry settings. Defaults to :meth:`StyleSettings.from_env`.
    """
    settings = settings if settings is not None else StyleSettings.from_env()
    registry = StyleRegistry(duplicate_policy=settings.duplicate_policy)

    register_base_styles(registry)
    register_color_styles(registry)
    register_journal_styles(registry)
    register_misc_styles(registry)
    register_language_styles(registry)
    register_combination_styles(registry)

    if settings.user_styles_path is not None:
        load_user_styles(registry, settings.user_styles_path)

    registry.freeze()
    logger.debug("Built style registry with %d styles", len(registry))
    return registry


_REGISTRY: StyleRegistry | None = None


def initialize(settings: StyleSettings | None = None) -> StyleRegistry:
    """Build the process-wide registry once and return it.

    Later calls return the existing registry; *settings* only take effect
    on the first call.
    """
    global _REGISTRY  # noqa: PLW0603
    if _REGISTRY is None:
        _REGISTRY = build_registry(settings)
    elif settings is not None:
        logger.warning("Style registry already initialized; ignoring new settings")
    return _REGISTRY


def get_registry() -> StyleRegistry:
    """Return the process-wide registry, building it on first use."""
    return _REGISTRY if _REGISTRY is not None else initialize()
