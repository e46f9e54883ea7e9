"""Exceptions raised by dotstore."""

from __future__ import annotations

from pathlib import Path


class DotstoreError(Exception):
    """Base class for all dotstore errors."""


class BaseDirectoryUnavailable(DotstoreError, LookupError):
    """The platform could not determine the requested base directory."""

    def __init__(self, kind):
        self.kind = kind
        label = getattr(kind, "value", kind)
        super().__init__(f"Could not determine the {label} directory on this platform")

    def __reduce__(self):
        return type(self), (self.kind,)


class DirectoryCreationFailed(DotstoreError, OSError):
    """Creating a dot directory failed.

    Carries the ``errno`` and ``strerror`` of the underlying ``OSError``
    unchanged; ``filename`` is the dot directory that was being created.
    The original exception is kept as ``error``.
    """

    def __init__(self, path: Path, error: OSError):
        super().__init__(error.errno, error.strerror or str(error), str(path))
        self.path = path
        self.error = error

    def __reduce__(self):
        return type(self), (self.path, self.error)
