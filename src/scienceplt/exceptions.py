"""Custom exception hierarchy for scienceplt.

All domain-specific exceptions inherit from ``SciencePltError``, enabling
callers to catch broad categories or specific error types.

Example::

    from scienceplt.exceptions import StyleNotFoundError

    try:
        use_style("sciense")
    except StyleNotFoundError as exc:
        logger.error("Unknown style: %s", exc.name)
"""

from __future__ import annotations

from collections.abc import Iterable


class SciencePltError(Exception):
    """Base exception for all scienceplt domain errors."""


class StyleNotFoundError(SciencePltError, KeyError):
    """Raised when a style name is not registered.

    Carries the requested ``name`` and the sorted ``available`` names so
    callers can build a helpful message or suggest alternatives.
    """

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self) -> str:
        known = ", ".join(self.available) if self.available else "(none)"
        return f"Style {self.name!r} not found. Available styles: {known}"


class InvalidCountError(SciencePltError, ValueError):
    """Raised when a palette is requested with fewer than one color."""

    def __init__(self, n: object) -> None:
        self.n = n
        super().__init__(f"Palette size must be an integer >= 1, got {n!r}")


class DuplicateNameError(SciencePltError):
    """Raised when registering a style name that already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Style {name!r} is already registered")


class RegistryFrozenError(SciencePltError):
    """Raised when registering into a registry that finished initialization."""


class StyleConfigError(SciencePltError):
    """Raised for invalid settings or user style definitions."""
