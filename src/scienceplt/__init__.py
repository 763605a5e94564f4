"""Publication-quality matplotlib style presets.

Named styles (``science``, journal, color, language and combination
presets) are kept in a read-only registry and applied to matplotlib's
global defaults or to a single figure.

Example::

    import matplotlib.pyplot as plt
    import scienceplt

    with scienceplt.style_context("science+ieee"):
        fig, ax = plt.subplots()
        ax.plot([0, 1], [0, 1])
"""

from __future__ import annotations

from scienceplt.exceptions import (
    DuplicateNameError,
    InvalidCountError,
    RegistryFrozenError,
    SciencePltError,
    StyleConfigError,
    StyleNotFoundError,
)
from scienceplt.palettes import rainbow_colors
from scienceplt.registry import StyleCategory, StyleEntry, get_registry, initialize
from scienceplt.styles import (
    apply_theme,
    get_theme,
    list_categories,
    list_styles,
    style_context,
    use_style,
    with_style,
)
from scienceplt.theme import Theme, merge_themes

__all__ = [
    "DuplicateNameError",
    "InvalidCountError",
    "RegistryFrozenError",
    "SciencePltError",
    "StyleCategory",
    "StyleConfigError",
    "StyleEntry",
    "StyleNotFoundError",
    "Theme",
    "apply_theme",
    "get_registry",
    "get_theme",
    "initialize",
    "list_categories",
    "list_styles",
    "merge_themes",
    "rainbow_colors",
    "style_context",
    "use_style",
    "with_style",
]
