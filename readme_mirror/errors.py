"""Exceptions raised by the mirroring pipeline.

Every error here is fatal to a run. Failures scoped to a single asset are
logged and recorded on its ``AssetResult`` instead of being raised.
"""

from __future__ import annotations


class MirrorError(Exception):
    """Base class for errors that abort a mirror run."""


class InvalidRepositoryError(MirrorError):
    """The repository URL is malformed or points at an unsupported host."""


class FetchError(MirrorError):
    """The document could not be retrieved from the raw-content endpoint."""

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class PersistError(MirrorError):
    """A required file could not be written to the destination."""
