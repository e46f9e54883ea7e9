"""Shared test fixtures."""

import pytest

from dotstore import basedirs
from dotstore.basedirs import StoreKind


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Keep the CLI away from the real user config file."""
    config_dir = tmp_path / "dotstore-config"
    monkeypatch.setenv("DOTSTORE_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point the home directory resolver at a temporary directory."""
    home = tmp_path / "home" / "user"
    monkeypatch.setitem(basedirs._RESOLVERS, StoreKind.HOME, lambda: home)
    return home


@pytest.fixture
def fake_config_root(tmp_path, monkeypatch):
    """Point the config directory resolver at a temporary directory."""
    root = tmp_path / "home" / "user" / ".config"
    monkeypatch.setitem(basedirs._RESOLVERS, StoreKind.CONFIG, lambda: root)
    return root


@pytest.fixture
def no_home(monkeypatch):
    """Simulate a platform that cannot determine a home directory."""
    monkeypatch.setitem(basedirs._RESOLVERS, StoreKind.HOME, lambda: None)
