"""Registry settings and centralized defaults."""

from __future__ import annotations

from scienceplt.config.settings import DuplicatePolicy, StyleSettings

__all__ = [
    "DuplicatePolicy",
    "StyleSettings",
]
