"""Centralized StrEnum discovery module.

Re-exports all project StrEnums from their original locations.
Developers can import from either the original module or from here.

Example::

    # Original (preferred for domain clarity):
    from scienceplt.theme import LineStyle

    # Discovery (find all available enums):
    from scienceplt.utils.enums import LineStyle
"""

from __future__ import annotations

# Config
from scienceplt.config.settings import DuplicatePolicy

# Registry
from scienceplt.registry import StyleCategory

# Theme
from scienceplt.theme import FrameStyle, LineStyle, MarkerShape, TickDirection

__all__ = [
    "DuplicatePolicy",
    "FrameStyle",
    "LineStyle",
    "MarkerShape",
    "StyleCategory",
    "TickDirection",
]
