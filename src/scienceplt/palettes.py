"""Color palettes for the built-in styles.

Most palettes come from Paul Tol's colour-blind safe schemes
(https://personal.sron.nl/~pault/). :func:`rainbow_colors` selects a
discrete subset of Tol's 23-color discrete rainbow for a requested count.
"""

from __future__ import annotations

import logging
import operator

import numpy as np
from matplotlib.colors import to_hex, to_rgb

from scienceplt.config.defaults import RAINBOW_REFERENCE_SIZE
from scienceplt.exceptions import InvalidCountError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Fixed palettes
# ---------------------------------------------------------------------------

STD_COLORS: tuple[str, ...] = (
    "#0C5DA5",  # blue
    "#00B945",  # green
    "#FF9500",  # yellow
    "#FF2C00",  # red
    "#845B97",  # violet
    "#474747",  # dark gray
    "#9E9E9E",  # light gray
)

BRIGHT: tuple[str, ...] = (
    "#4477AA", "#EE6677", "#228833", "#CCBB44", "#66CCEE", "#AA3377", "#BBBBBB",
)

VIBRANT: tuple[str, ...] = (
    "#EE7733", "#0077BB", "#33BBEE", "#EE3377", "#CC3311", "#009988", "#BBBBBB",
)

MUTED: tuple[str, ...] = (
    "#CC6677", "#332288", "#DDCC77", "#117733", "#88CCEE",
    "#882255", "#44AA99", "#999933", "#AA4499", "#DDDDDD",
)

LIGHT: tuple[str, ...] = (
    "#77AADD", "#EE8866", "#EEDD88", "#FFAABB", "#99DDFF",
    "#44BB99", "#BBCC33", "#AAAA00", "#DDDDDD",
)

HIGH_CONTRAST: tuple[str, ...] = ("#004488", "#DDAA33", "#BB5566")

RETRO: tuple[str, ...] = (
    "#4165C0", "#E770A2", "#5AC3BE", "#696969", "#F79A1E", "#BA7DCD",
)

HIGH_VIS: tuple[str, ...] = (
    "#0D49FB", "#E6091C", "#26EB47", "#8936DF", "#FEC32D", "#25D7FD",
)

IEEE: tuple[str, ...] = ("#000000", "#FF0000", "#0000FF", "#00FF00")

# Paul Tol's discrete rainbow, light purple through dark brown
RAINBOW_REFERENCE: tuple[str, ...] = (
    "#E8ECFB", "#D9CCE3", "#CAACCB", "#BA8DB4", "#AA6F9E", "#994F88", "#882E72",
    "#1965B0", "#437DBF", "#6195CF", "#7BAFDE", "#4EB265", "#90C987", "#CAE0AB",
    "#F7F056", "#F7CB45", "#F4A736", "#EE8026", "#E65518", "#DC050C", "#A5170E",
    "#72190E", "#42150A",
)

MID_BLUE = "#1965B0"
LIGHT_BLUE = "#7BAFDE"
GREEN = "#4EB265"
PALE_YELLOW = "#F7F056"
DEEP_RED = "#DC050C"

# Hand-picked subsets for small counts, in reference order
_CURATED_RAINBOW: dict[int, tuple[str, ...]] = {
    1: (MID_BLUE,),
    2: (MID_BLUE, DEEP_RED),
    3: (MID_BLUE, PALE_YELLOW, DEEP_RED),
    4: (MID_BLUE, GREEN, PALE_YELLOW, DEEP_RED),
    5: (MID_BLUE, LIGHT_BLUE, GREEN, PALE_YELLOW, DEEP_RED),
}


# ---------------------------------------------------------------------------
# Discrete rainbow
# ---------------------------------------------------------------------------


def rainbow_indices(n: int, size: int = RAINBOW_REFERENCE_SIZE) -> list[int]:
    """Return *n* evenly spaced indices into a sequence of length *size*.

    Both endpoints are included. Positions ``k * (size - 1) / (n - 1)`` are
    rounded half away from zero using integer arithmetic, so ties such as
    ``5.5`` always select the upper index.
    """
    if n == 1:
        return [0]
    span = size - 1
    denom = 2 * (n - 1)
    return [(2 * k * span + (n - 1)) // denom for k in range(n)]


def rainbow_colors(n: int) -> tuple[str, ...]:
    """Return *n* colors from Paul Tol's discrete rainbow.

    Parameters
    ----------
    n:
        Number of colors. Counts 1 to 5 use curated subsets, 6 to 23 use
        evenly spaced reference entries, larger counts fall back to
        :func:`distinguishable_colors` seeded with the curated endpoints.

    Returns
    -------
    Tuple of ``n`` hex color strings. Deterministic for a given ``n``.

    Raises
    ------
    InvalidCountError
        If ``n`` is not an integer >= 1.
    """
    if isinstance(n, bool):
        raise InvalidCountError(n)
    try:
        count = operator.index(n)
    except TypeError:
        raise InvalidCountError(n) from None
    if count < 1:
        raise InvalidCountError(n)

    if count in _CURATED_RAINBOW:
        return _CURATED_RAINBOW[count]
    if count <= RAINBOW_REFERENCE_SIZE:
        return tuple(RAINBOW_REFERENCE[i] for i in rainbow_indices(count))
    return distinguishable_colors(count, seeds=(MID_BLUE, DEEP_RED))


# ---------------------------------------------------------------------------
# Fallback generator
# ---------------------------------------------------------------------------

# HUSL candidate pool: (saturation, lightness) rings around the hue circle
_CANDIDATE_RINGS: tuple[tuple[float, float], ...] = (
    (0.9, 0.35),
    (0.9, 0.5),
    (0.9, 0.65),
    (0.9, 0.8),
    (0.6, 0.45),
    (0.6, 0.6),
    (0.6, 0.75),
    (0.35, 0.55),
)


def _candidate_pool(n: int) -> np.ndarray:
    """Deterministic pool of RGB candidates, at least ``8 * n`` entries."""
    import seaborn as sns

    n_hues = max(24, n)
    rings = [
        np.asarray(sns.husl_palette(n_hues, h=0.01, s=s, l=lightness))
        for s, lightness in _CANDIDATE_RINGS
    ]
    return np.clip(np.concatenate(rings, axis=0), 0.0, 1.0)


def distinguishable_colors(n: int, seeds: tuple[str, ...] = ()) -> tuple[str, ...]:
    """Return *n* mutually distinct colors, starting with *seeds*.

    Colors are picked greedily from a HUSL candidate pool: each step takes
    the candidate with the largest CIEDE2000 distance to everything chosen
    so far. The seeds count towards *n* and are never repeated.

    Parameters
    ----------
    n:
        Total number of colors, seeds included.
    seeds:
        Colors that open the sequence and that new picks stay away from.
    """
    from skimage.color import deltaE_ciede2000, rgb2lab

    if n < 1:
        raise InvalidCountError(n)

    chosen = [to_hex(c).upper() for c in seeds[:n]]
    if len(chosen) == n:
        return tuple(chosen)

    pool_rgb = _candidate_pool(n)
    pool_lab = rgb2lab(pool_rgb)

    min_dist = np.full(len(pool_lab), np.inf)
    for color in chosen:
        seed_lab = rgb2lab(np.asarray([to_rgb(color)]))
        dist = deltaE_ciede2000(pool_lab, np.repeat(seed_lab, len(pool_lab), axis=0))
        min_dist = np.minimum(min_dist, dist)

    while len(chosen) < n:
        idx = int(np.argmax(min_dist))
        chosen.append(to_hex(pool_rgb[idx]).upper())
        dist = deltaE_ciede2000(pool_lab, np.tile(pool_lab[idx], (len(pool_lab), 1)))
        min_dist = np.minimum(min_dist, dist)
        min_dist[idx] = -np.inf

    logger.debug("Generated %d distinguishable colors (%d seeds)", n, len(seeds))
    return tuple(chosen)
