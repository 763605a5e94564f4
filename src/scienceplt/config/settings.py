"""Runtime settings for building the style registry.

Settings come from keyword arguments or from environment variables:

1. ``SCIENCEPLT_DUPLICATE_POLICY``: ``error`` (default) or ``overwrite``
2. ``SCIENCEPLT_USER_STYLES``: path to a YAML file of extra styles
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum
from pathlib import Path  # noqa: TC003  Pydantic needs Path at runtime

from pydantic import BaseModel, Field, ValidationError

from scienceplt.config.defaults import ENV_DUPLICATE_POLICY, ENV_USER_STYLES
from scienceplt.exceptions import StyleConfigError

logger = logging.getLogger(__name__)


class DuplicatePolicy(StrEnum):
    """What ``StyleRegistry.register`` does when a name already exists."""

    ERROR = "error"
    OVERWRITE = "overwrite"


class StyleSettings(BaseModel):
    """Configuration for the process-wide style registry.

    Parameters
    ----------
    duplicate_policy:
        Conflict handling for repeated style names.
    user_styles_path:
        Optional YAML file with user styles registered after the built-ins.
    """

    duplicate_policy: DuplicatePolicy = Field(
        default=DuplicatePolicy.ERROR,
        description="Conflict handling for repeated style names",
    )
    user_styles_path: Path | None = Field(
        default=None,
        description="YAML file with additional user styles",
    )

    @classmethod
    def from_env(cls) -> StyleSettings:
        """Build settings from ``SCIENCEPLT_*`` environment variables.

        Raises
        ------
        StyleConfigError
            When an environment variable holds an invalid value.
        """
        raw: dict[str, str] = {}
        policy = os.environ.get(ENV_DUPLICATE_POLICY)
        if policy:
            raw["duplicate_policy"] = policy.strip().lower()
        user_styles = os.environ.get(ENV_USER_STYLES)
        if user_styles:
            raw["user_styles_path"] = user_styles

        try:
            settings = cls.model_validate(raw)
        except ValidationError as exc:
            msg = f"Invalid scienceplt settings from environment: {exc}"
            raise StyleConfigError(msg) from exc

        if raw:
            logger.debug("Loaded settings from environment: %s", sorted(raw))
        return settings
