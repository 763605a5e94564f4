"""Example figure gallery.

Registry of example figures, each drawn under one style with
``style_context`` and exported with :func:`save_figure`. The curves are
``x**(2p+1) / (1 + x**(2p))`` for several orders ``p``.

Usage::

    python -m scienceplt.gallery
    python -m scienceplt.gallery --list
    python -m scienceplt.gallery --example fig02_ieee --output-dir figures
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np

from scienceplt.config.defaults import DEFAULT_GALLERY_DIR
from scienceplt.figure_export import save_figure
from scienceplt.styles import style_context

logger = logging.getLogger(__name__)


def model(x: np.ndarray, p: float) -> np.ndarray:
    """Smooth step that sharpens around ``x = 1`` as *p* grows."""
    return x ** (2 * p + 1) / (1 + x ** (2 * p))


def _order_plot(p_values: list[int], linestyles: list[str] | None = None) -> plt.Figure:
    """Plot one curve per order, labelled like the voltage/current example."""
    x = np.linspace(0.75, 1.25, 201)
    fig, ax = plt.subplots()
    for i, p in enumerate(p_values):
        kwargs: dict[str, Any] = {"label": str(p)}
        if linestyles is not None:
            kwargs["linestyle"] = linestyles[i % len(linestyles)]
        ax.plot(x, model(x, p), **kwargs)
    ax.legend(title="Order", loc="lower right")
    ax.set_xlabel("Voltage (mV)")
    ax.set_ylabel(r"Current ($\mu$A)")
    ax.autoscale(tight=True)
    return fig


# ---------------------------------------------------------------------------
# Example generators (each returns a Figure)
# ---------------------------------------------------------------------------


def _gen_science() -> plt.Figure:
    return _order_plot([10, 15, 20, 30, 50, 100])


def _gen_ieee() -> plt.Figure:
    return _order_plot(
        [10, 20, 40, 100], linestyles=["solid", "dashed", "dotted", "dashdot"]
    )


def _gen_vibrant() -> plt.Figure:
    return _order_plot([5, 10, 15, 20, 30, 50, 100])


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

EXAMPLE_REGISTRY: list[dict[str, Any]] = [
    {"name": "fig01_science", "style": "science", "generator": _gen_science},
    {"name": "fig02_ieee", "style": "science+ieee", "generator": _gen_ieee},
    {"name": "fig03_vibrant", "style": "science+vibrant", "generator": _gen_vibrant},
]


def list_examples() -> list[str]:
    """Return list of all registered example names."""
    return [entry["name"] for entry in EXAMPLE_REGISTRY]


def _render(entry: dict[str, Any], output_dir: Path | None) -> Path | None:
    with style_context(entry["style"]):
        fig = entry["generator"]()
        try:
            return save_figure(
                fig, entry["name"], output_dir=output_dir, style=entry["style"]
            )
        finally:
            plt.close(fig)


def generate_example(
    name: str,
    output_dir: Path | None = None,
) -> Path | None:
    """Generate a single example figure by name.

    Parameters
    ----------
    name:
        Registered example name.
    output_dir:
        Output directory. Defaults to cwd.

    Returns
    -------
    Path to the saved figure, or None if unknown or failed.
    """
    for entry in EXAMPLE_REGISTRY:
        if entry["name"] == name:
            try:
                return _render(entry, output_dir)
            except Exception:
                logger.exception("Failed to generate example: %s", name)
                plt.close("all")
                return None
    logger.warning("Unknown example name: %s", name)
    return None


def generate_all_examples(
    output_dir: Path | None = None,
) -> dict[str, list[str]]:
    """Generate all registered example figures.

    Returns
    -------
    Summary dict with 'succeeded' and 'failed' lists of example names.
    """
    succeeded: list[str] = []
    failed: list[str] = []

    for entry in EXAMPLE_REGISTRY:
        name = entry["name"]
        try:
            _render(entry, output_dir)
            succeeded.append(name)
            logger.info("Generated: %s (%s)", name, entry["style"])
        except Exception:
            logger.exception("Failed: %s", name)
            plt.close("all")
            failed.append(name)

    logger.info(
        "Example generation complete: %d succeeded, %d failed",
        len(succeeded),
        len(failed),
    )
    return {"succeeded": succeeded, "failed": failed}


if __name__ == "__main__":
    import argparse

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    parser = argparse.ArgumentParser(description="Generate scienceplt example figures")
    parser.add_argument("--example", help="Generate a specific example by name")
    parser.add_argument(
        "--list", action="store_true", help="List all registered examples"
    )
    parser.add_argument(
        "--output-dir", default=DEFAULT_GALLERY_DIR, help="Output directory"
    )
    args = parser.parse_args()

    if args.list:
        for entry in EXAMPLE_REGISTRY:
            print(f"  {entry['name']:20s}  [{entry['style']}]")
    elif args.example:
        result = generate_example(args.example, output_dir=Path(args.output_dir))
        if result:
            print(f"Saved: {result}")
        else:
            print(f"Failed or unknown: {args.example}")
    else:
        summary = generate_all_examples(output_dir=Path(args.output_dir))
        print(
            f"Succeeded: {len(summary['succeeded'])}, Failed: {len(summary['failed'])}"
        )
        if summary["failed"]:
            print(f"Failed examples: {summary['failed']}")
