"""Pytest configuration and fixtures."""

import pytest

# Variables that change how widths and colors come out
RENDER_ENV_VARS = (
    "CELLBOX_AMBIGUOUS_WIDTH",
    "CELLBOX_COLOR_PROFILE",
    "NO_COLOR",
    "COLORTERM",
    "TERM",
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unicode: tests that depend on wcwidth's character width tables"
    )


@pytest.fixture(autouse=True)
def clean_render_env(monkeypatch):
    """Run every test against a neutral terminal environment."""
    for name in RENDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def block():
    """Two-line, two-cell-wide content block."""
    return "ab\ncd"
