from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib

# Non-interactive backend, selected before pyplot is imported anywhere.
matplotlib.use("Agg")

import matplotlib as mpl  # noqa: E402
import pytest  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Iterator


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: renders and exports figures")


@pytest.fixture(autouse=True)
def _isolate_rcparams() -> Iterator[None]:
    """Restore matplotlib's global defaults after every test."""
    with mpl.rc_context():
        yield


@pytest.fixture(autouse=True)
def _clear_style_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SCIENCEPLT_* variables from the caller's shell out of the tests."""
    monkeypatch.delenv("SCIENCEPLT_DUPLICATE_POLICY", raising=False)
    monkeypatch.delenv("SCIENCEPLT_USER_STYLES", raising=False)
