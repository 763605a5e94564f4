"""Multi-format figure export with an optional style record.

Exports each requested format (PDF by default) at the DPI given by
``rcParams["savefig.dpi"]``, so journal styles such as ``ieee`` control the
raster resolution. When a style name is passed, a JSON file recording the
style and its theme is written next to the figure.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from scienceplt.config.defaults import DEFAULT_EXPORT_FORMATS
from scienceplt.registry import get_registry

if TYPE_CHECKING:
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


def save_figure(
    fig: Figure,
    name: str,
    output_dir: Path | None = None,
    formats: list[str] | None = None,
    style: str | None = None,
) -> Path | None:
    """Save figure in multiple formats, optionally recording its style.

    Parameters
    ----------
    fig:
        Matplotlib figure to save.
    name:
        Base filename (without extension).
    output_dir:
        Output directory. Defaults to current working directory.
    formats:
        List of formats (``"pdf"``, ``"png"``, ``"svg"``, ``"eps"``).
        Defaults to ``["pdf"]``.
    style:
        Registered style the figure was drawn with. Written with its
        category and theme to ``<name>.json``.

    Returns
    -------
    Path to the first saved file, or ``None`` if nothing was saved.

    Raises
    ------
    StyleNotFoundError
        When *style* is given but not registered.
    """
    output_dir = output_dir if output_dir is not None else Path.cwd()
    output_dir.mkdir(parents=True, exist_ok=True)
    fmt_list = formats if formats else list(DEFAULT_EXPORT_FORMATS)

    record = None
    if style is not None:
        entry = get_registry().get(style)
        record = {
            "style": entry.name,
            "category": str(entry.category),
            "description": entry.description,
            "theme": entry.theme.model_dump(mode="json", exclude_none=True),
        }

    first_path: Path | None = None

    for fmt in fmt_list:
        out_path = output_dir / f"{name}.{fmt}"
        fig.savefig(str(out_path), format=fmt, bbox_inches="tight")
        logger.info("Saved figure: %s", out_path)
        if first_path is None:
            first_path = out_path

    if record is not None:
        json_path = output_dir / f"{name}.json"
        json_path.write_text(json.dumps(record, indent=2), encoding="utf-8")
        logger.info("Saved style record: %s", json_path)

    return first_path
