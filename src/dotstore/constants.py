"""Shared constants and defaults."""

APP_NAME = "dotstore"

DOT_PREFIX = "."

CONFIG_FILE_NAME = "config.toml"
CONFIG_DIR_ENV = "DOTSTORE_CONFIG_DIR"

DEFAULT_KIND = "home"
