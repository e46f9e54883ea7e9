"""Cross-platform resolution of the per-user base directories."""

from __future__ import annotations

import enum
from pathlib import Path

import platformdirs


class StoreKind(enum.Enum):
    """Base directories a dot directory can be created in."""
    HOME = "home"
    CONFIG = "config"
    CONFIG_LOCAL = "config-local"
    CACHE = "cache"
    DATA = "data"
    DATA_LOCAL = "data-local"
    STATE = "state"
    LOG = "log"
    RUNTIME = "runtime"
    DESKTOP = "desktop"
    DOCUMENTS = "documents"
    DOWNLOADS = "downloads"
    PICTURES = "pictures"
    VIDEOS = "videos"
    MUSIC = "music"
    EXECUTABLE = "executable"
    FONT = "font"
    PREFERENCE = "preference"
    PUBLIC = "public"
    TEMPLATE = "template"


def _as_dir(value) -> Path | None:
    # An unexpanded "~" or an empty string means the platform had nothing to offer.
    if not value:
        return None
    path = Path(value)
    if not path.is_absolute():
        return None
    return path


def home_dir() -> Path | None:
    try:
        return _as_dir(Path.home())
    except (RuntimeError, KeyError):
        return None


def config_dir() -> Path | None:
    """User configuration root, roaming profile on Windows (e.g. ``~/.config``)."""
    return _as_dir(platformdirs.user_config_dir(roaming=True))


def config_local_dir() -> Path | None:
    return _as_dir(platformdirs.user_config_dir(roaming=False))


def cache_dir() -> Path | None:
    return _as_dir(platformdirs.user_cache_dir())


def data_dir() -> Path | None:
    return _as_dir(platformdirs.user_data_dir(roaming=True))


def data_local_dir() -> Path | None:
    return _as_dir(platformdirs.user_data_dir(roaming=False))


def state_dir() -> Path | None:
    return _as_dir(platformdirs.user_state_dir())


def log_dir() -> Path | None:
    return _as_dir(platformdirs.user_log_dir())


def runtime_dir() -> Path | None:
    return _as_dir(platformdirs.user_runtime_dir())


def desktop_dir() -> Path | None:
    return _as_dir(platformdirs.user_desktop_dir())


def documents_dir() -> Path | None:
    return _as_dir(platformdirs.user_documents_dir())


def downloads_dir() -> Path | None:
    return _as_dir(platformdirs.user_downloads_dir())


def pictures_dir() -> Path | None:
    return _as_dir(platformdirs.user_pictures_dir())


def videos_dir() -> Path | None:
    return _as_dir(platformdirs.user_videos_dir())


def music_dir() -> Path | None:
    return _as_dir(platformdirs.user_music_dir())


def executable_dir() -> Path | None:
    """Per-user executables, e.g. ``~/.local/bin``."""
    return _as_dir(platformdirs.user_bin_dir())


def font_dir() -> Path | None:
    return _as_dir(platformdirs.user_fonts_dir())


def preference_dir() -> Path | None:
    """``~/Library/Preferences`` on macOS, the config root elsewhere."""
    return _as_dir(platformdirs.user_preference_dir())


def public_dir() -> Path | None:
    return _as_dir(platformdirs.user_publicshare_dir())


def template_dir() -> Path | None:
    return _as_dir(platformdirs.user_templates_dir())


_RESOLVERS = {
    StoreKind.HOME: home_dir,
    StoreKind.CONFIG: config_dir,
    StoreKind.CONFIG_LOCAL: config_local_dir,
    StoreKind.CACHE: cache_dir,
    StoreKind.DATA: data_dir,
    StoreKind.DATA_LOCAL: data_local_dir,
    StoreKind.STATE: state_dir,
    StoreKind.LOG: log_dir,
    StoreKind.RUNTIME: runtime_dir,
    StoreKind.DESKTOP: desktop_dir,
    StoreKind.DOCUMENTS: documents_dir,
    StoreKind.DOWNLOADS: downloads_dir,
    StoreKind.PICTURES: pictures_dir,
    StoreKind.VIDEOS: videos_dir,
    StoreKind.MUSIC: music_dir,
    StoreKind.EXECUTABLE: executable_dir,
    StoreKind.FONT: font_dir,
    StoreKind.PREFERENCE: preference_dir,
    StoreKind.PUBLIC: public_dir,
    StoreKind.TEMPLATE: template_dir,
}


def resolve(kind: StoreKind | str) -> Path | None:
    """Return the base directory for *kind*, or ``None`` if it is unavailable."""
    return _RESOLVERS[StoreKind(kind)]()
