"""Exceptions raised by the artifactfetch module."""

from __future__ import annotations


class TfaError(RuntimeError):
    """Base class for recoverable per-file or per-export failures."""


class MissingCoordinateError(TfaError):
    """Raised when a required coordinate is absent or empty."""


class MetadataUnavailableError(TfaError):
    """Raised when the remote metadata endpoint cannot be queried."""


class MetadataFieldMissingError(TfaError):
    """Raised when the metadata document lacks a required field."""

    def __init__(self, field_name: str, url: str | None = None) -> None:
        self.field_name = field_name
        self.url = url
        where = f" in {url}" if url else ""
        super().__init__(f"metadata field '{field_name}' missing{where}")


class DownloadFailedError(TfaError):
    """Raised when an artifact payload cannot be retrieved."""


class CacheWriteFailedError(TfaError):
    """Raised when a cache directory or file cannot be written."""


class RepositoryRootError(RuntimeError):
    """Raised when the tfa home or repository root cannot be created."""
