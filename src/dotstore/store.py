"""Create dot directories (e.g. ``~/.barracuda``) in common per-user places.

Every ``*_store`` function joins ``"." + name`` onto a base directory,
creates the result along with any missing parents, and returns it. Calling
one twice with the same arguments is fine: an existing directory counts as
success.

``name`` is used verbatim. A name containing separators produces a nested
path (``custom_store(root, "settings/user/local")`` gives
``root/.settings/user/local``), and whatever the OS makes of an odd name is
what the caller gets.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotstore import basedirs
from dotstore.basedirs import StoreKind
from dotstore.constants import DOT_PREFIX
from dotstore.errors import BaseDirectoryUnavailable, DirectoryCreationFailed


def dot_name(name: str | os.PathLike) -> str:
    """Return the leaf segment for *name*: ``"." + name``."""
    return f"{DOT_PREFIX}{os.fspath(name)}"


def _create_dir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationFailed(path, e) from e
    return path


def _base_dir(kind: StoreKind | str) -> Path:
    kind = StoreKind(kind)
    base = basedirs.resolve(kind)
    if base is None:
        raise BaseDirectoryUnavailable(kind)
    return base


def store_path(kind: StoreKind | str, name: str | os.PathLike) -> Path:
    """Return where the dot directory for *kind* would live, without creating it.

    Raises ``BaseDirectoryUnavailable`` if the base directory cannot be
    determined and ``ValueError`` for an unknown kind.
    """
    return _base_dir(kind) / dot_name(name)


def create_store(kind: StoreKind | str, name: str | os.PathLike) -> Path:
    """Create ``<base of kind>/.name`` and return it.

    Nothing is touched on disk when the base directory is unavailable.
    """
    return _create_dir(store_path(kind, name))


def custom_store(root_path: str | os.PathLike, name: str | os.PathLike) -> Path:
    """Create ``<root_path>/.name`` and return it.

    *root_path* is used as given and is created too if it does not exist.
    Directories created before a failure are left in place.
    """
    return _create_dir(Path(root_path) / dot_name(name))


def home_store(name: str | os.PathLike) -> Path:
    """Create a dot directory in the home directory, e.g. ``~/.barracuda``."""
    return create_store(StoreKind.HOME, name)


def config_store(name: str | os.PathLike) -> Path:
    """Create a dot directory in the user configuration root, e.g. ``~/.config/.editor``."""
    return create_store(StoreKind.CONFIG, name)


def config_local_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.CONFIG_LOCAL, name)


def cache_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.CACHE, name)


def data_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.DATA, name)


def data_local_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.DATA_LOCAL, name)


def state_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.STATE, name)


def log_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.LOG, name)


def runtime_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.RUNTIME, name)


def desktop_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.DESKTOP, name)


def documents_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.DOCUMENTS, name)


def downloads_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.DOWNLOADS, name)


def pictures_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.PICTURES, name)


def videos_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.VIDEOS, name)


def music_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.MUSIC, name)


def executable_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.EXECUTABLE, name)


def font_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.FONT, name)


def preference_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.PREFERENCE, name)


def public_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.PUBLIC, name)


def template_store(name: str | os.PathLike) -> Path:
    return create_store(StoreKind.TEMPLATE, name)
