"""Configuration loading, saving, and management for the dotstore command."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import tomli_w
from platformdirs import user_config_dir

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from dotstore.basedirs import StoreKind
from dotstore.constants import APP_NAME, CONFIG_DIR_ENV, CONFIG_FILE_NAME, DEFAULT_KIND


def get_config_dir() -> Path:
    """Resolve the directory holding the dotstore config file.

    Priority: DOTSTORE_CONFIG_DIR env var > platform default.
    """
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)

    return Path(user_config_dir(APP_NAME))


def get_config_path(config_dir: Path | None = None) -> Path:
    return (config_dir or get_config_dir()) / CONFIG_FILE_NAME


@dataclass
class StoreDefaults:
    kind: str = DEFAULT_KIND
    root: str = ""


@dataclass
class DotstoreConfig:
    store: StoreDefaults = field(default_factory=StoreDefaults)

    @classmethod
    def load(cls, config_path: Path | None = None) -> DotstoreConfig:
        """Load config from TOML file, falling back to defaults for missing keys."""
        config = cls()
        if config_path is None or not config_path.exists():
            return config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        for section_field in fields(config):
            section = data.get(section_field.name)
            if not isinstance(section, dict):
                continue
            obj = getattr(config, section_field.name)
            for k, v in section.items():
                if not hasattr(obj, k):
                    continue
                try:
                    config.set(f"{section_field.name}.{k}", v)
                except ValueError as e:
                    raise ValueError(f"{config_path}: {e}") from e

        return config

    def save(self, config_path: Path) -> None:
        """Write current config to TOML file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        data = self._to_dict()
        with open(config_path, "wb") as f:
            tomli_w.dump(data, f)

    def get(self, key: str) -> Any:
        """Get a config value by dotted key (e.g., 'store.kind')."""
        obj, name = self._lookup(key)
        return getattr(obj, name)

    def set(self, key: str, value: Any) -> None:
        """Set a config value by dotted key."""
        obj, name = self._lookup(key)
        current = getattr(obj, name)
        if not isinstance(value, type(current)):
            raise ValueError(f"Expected {type(current).__name__} for key {key!r}, got {value!r}")
        _validate_value(key, value)
        setattr(obj, name, value)

    def _lookup(self, key: str) -> tuple[Any, str]:
        section, _, name = key.partition(".")
        if not name:
            raise KeyError(f"Invalid key format: {key!r}. Use 'section.key' (e.g., 'store.kind')")
        obj = getattr(self, section, None)
        if obj is None or section not in {f.name for f in fields(self)}:
            raise KeyError(f"Unknown config section: {section!r}")
        if not hasattr(obj, name):
            raise KeyError(f"Unknown config key: {key!r}")
        return obj, name

    def _to_dict(self) -> dict:
        """Convert config to a nested dict for TOML serialization."""
        result = {}
        for section_field in fields(self):
            section_obj = getattr(self, section_field.name)
            section_dict = {}
            for f in fields(section_obj):
                section_dict[f.name] = getattr(section_obj, f.name)
            result[section_field.name] = section_dict
        return result


def _validate_value(key: str, value: Any) -> None:
    """Validate a config value."""
    if key == "store.kind":
        valid = [k.value for k in StoreKind]
        if value not in valid:
            raise ValueError(f"Invalid kind: {value!r}. Choose from: {', '.join(valid)}")
