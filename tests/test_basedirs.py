"""Tests for base directory resolution."""

import sys
from pathlib import Path

import pytest

from dotstore import basedirs
from dotstore.basedirs import StoreKind, resolve

linux_only = pytest.mark.skipif(sys.platform != "linux", reason="XDG variables are Linux-specific")


def test_as_dir_absolute(tmp_path):
    assert basedirs._as_dir(str(tmp_path)) == tmp_path


def test_as_dir_empty():
    assert basedirs._as_dir("") is None
    assert basedirs._as_dir(None) is None


def test_as_dir_relative():
    assert basedirs._as_dir("~/.config") is None
    assert basedirs._as_dir("relative/dir") is None


def test_home_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert basedirs.home_dir() == tmp_path


def test_home_dir_unavailable(monkeypatch):
    def no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(no_home))
    assert basedirs.home_dir() is None


@linux_only
def test_config_dir_follows_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
    assert basedirs.config_dir() == tmp_path / "cfg"
    assert basedirs.config_local_dir() == tmp_path / "cfg"


@linux_only
def test_relative_xdg_value_is_unavailable(monkeypatch):
    monkeypatch.setenv("XDG_CACHE_HOME", "not/absolute")
    assert basedirs.cache_dir() is None


@linux_only
def test_data_and_state_follow_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    assert basedirs.data_dir() == tmp_path / "data"
    assert basedirs.data_local_dir() == tmp_path / "data"
    assert basedirs.state_dir() == tmp_path / "state"


def test_every_kind_has_a_resolver():
    assert set(basedirs._RESOLVERS) == set(StoreKind)


@pytest.mark.parametrize("kind", list(StoreKind))
def test_every_kind_resolves_to_absolute_or_none(kind):
    base = resolve(kind)
    assert base is None or base.is_absolute()


def test_resolve_dispatches_by_kind(tmp_path, monkeypatch):
    monkeypatch.setitem(basedirs._RESOLVERS, StoreKind.CACHE, lambda: tmp_path)
    assert resolve(StoreKind.CACHE) == tmp_path


def test_resolve_accepts_string_kind(fake_home):
    assert resolve("home") == fake_home


def test_resolve_unavailable(no_home):
    assert resolve(StoreKind.HOME) is None


def test_resolve_unknown_kind():
    with pytest.raises(ValueError):
        resolve("attic")


@linux_only
def test_preference_dir_is_config_root_on_linux():
    assert basedirs.preference_dir() == basedirs.config_dir()
