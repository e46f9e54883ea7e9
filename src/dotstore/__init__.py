"""Create dot directories (e.g. ``~/.project``) in common per-user places."""

__version__ = "0.1.0"

from dotstore.basedirs import StoreKind
from dotstore.errors import BaseDirectoryUnavailable, DirectoryCreationFailed, DotstoreError
from dotstore.store import (
    cache_store,
    config_local_store,
    config_store,
    create_store,
    custom_store,
    data_local_store,
    data_store,
    desktop_store,
    documents_store,
    dot_name,
    downloads_store,
    executable_store,
    font_store,
    home_store,
    log_store,
    music_store,
    pictures_store,
    preference_store,
    public_store,
    runtime_store,
    state_store,
    store_path,
    template_store,
    videos_store,
)

__all__ = [
    "StoreKind",
    "DotstoreError",
    "BaseDirectoryUnavailable",
    "DirectoryCreationFailed",
    "home_store",
    "config_store",
    "custom_store",
    "config_local_store",
    "cache_store",
    "data_store",
    "data_local_store",
    "state_store",
    "log_store",
    "runtime_store",
    "desktop_store",
    "documents_store",
    "downloads_store",
    "pictures_store",
    "videos_store",
    "music_store",
    "executable_store",
    "font_store",
    "preference_store",
    "public_store",
    "template_store",
    "create_store",
    "store_path",
    "dot_name",
]
