"""
Pytest configuration and shared fixtures.

Provides temporary home directories, environment builders and platform
switches so resolvers can be tested without touching the real user's
configuration.
"""

import pytest

from has_nerd_font.config import constants

# ===== Isolation Fixtures =====


@pytest.fixture(autouse=True)
def isolate_system_config(tmp_path, monkeypatch):
    """
    Point system-wide config paths into the test's temp directory.

    Keeps a real /etc/alacritty/alacritty.toml on the test machine from
    leaking into resolver results.
    """
    monkeypatch.setattr(
        constants,
        "ALACRITTY_SYSTEM_CONFIG",
        str(tmp_path / "etc" / "alacritty" / "alacritty.toml"),
    )


# ===== Home / Environment Fixtures =====


@pytest.fixture
def home(tmp_path):
    """Create an empty fake home directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def make_env():
    """
    Build an ordered environment snapshot from keyword pairs.

    Example:
        env = make_env(("TERM_PROGRAM", "zed"), ("HOME", str(home)))
    """

    def _make_env(*pairs: tuple[str, str]) -> list[tuple[str, str]]:
        return [(key, value) for key, value in pairs]

    return _make_env


# ===== Platform Fixtures =====


@pytest.fixture
def macos(monkeypatch):
    """Pretend to run on macOS."""
    monkeypatch.setattr("platform.system", lambda: "Darwin")


@pytest.fixture
def linux(monkeypatch):
    """Pretend to run on Linux."""
    monkeypatch.setattr("platform.system", lambda: "Linux")
