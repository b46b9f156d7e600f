from .exceptions import (
    CacheWriteFailedError,
    DownloadFailedError,
    MetadataFieldMissingError,
    MetadataUnavailableError,
    MissingCoordinateError,
    RepositoryRootError,
    TfaError,
)

__all__ = [
    "TfaError",
    "MissingCoordinateError",
    "MetadataUnavailableError",
    "MetadataFieldMissingError",
    "DownloadFailedError",
    "CacheWriteFailedError",
    "RepositoryRootError",
]
