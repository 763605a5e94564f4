"""Shared fixtures for integration tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib as mpl
import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture()
def rcparams_snapshot() -> Iterator[dict[str, object]]:
    """Snapshot of rcParams taken before the test body runs."""
    yield dict(mpl.rcParams.copy())


@pytest.fixture()
def close_figures() -> Iterator[None]:
    """Close every pyplot figure the test leaves open."""
    import matplotlib.pyplot as plt

    yield
    plt.close("all")
