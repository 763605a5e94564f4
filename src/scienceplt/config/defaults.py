"""Centralized configuration defaults for scienceplt.

Constants shared by the registry, the palette helpers and the gallery are
collected here so no module hardcodes them.
"""

from __future__ import annotations

# Environment variables read by StyleSettings.from_env (config/settings.py)
ENV_DUPLICATE_POLICY: str = "SCIENCEPLT_DUPLICATE_POLICY"
ENV_USER_STYLES: str = "SCIENCEPLT_USER_STYLES"

# Number of entries in Paul Tol's discrete rainbow (palettes.py)
RAINBOW_REFERENCE_SIZE: int = 23

# Figure export (figure_export.py)
DEFAULT_EXPORT_FORMATS: tuple[str, ...] = ("pdf",)

# Example gallery output (gallery.py)
DEFAULT_GALLERY_DIR: str = "figures"
