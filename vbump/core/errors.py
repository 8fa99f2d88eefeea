# vbump/core/errors.py
from __future__ import annotations


class VersionError(Exception):
    code = "VERSION_ERROR"


class InvalidFormat(VersionError, ValueError):
    """Caller-supplied text is not major.minor.patch."""

    code = "INVALID_FORMAT"


class InvalidProject(VersionError, ValueError):
    code = "INVALID_PROJECT"


class NotFound(VersionError):
    code = "NOT_FOUND"


class CorruptState(VersionError):
    """Persisted text for a project does not parse. Never auto-repaired."""

    code = "CORRUPT_STATE"


class StorageError(VersionError):
    code = "STORAGE_ERROR"
