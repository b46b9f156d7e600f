from .artifact import ArtifactCoordinates, RemoteArtifactDescriptor, SidecarDescriptor
from .models import (
    ExportResult,
    ExportStatus,
    ProcessAction,
    ProcessResult,
    ScanFailure,
    ScanReport,
)

__all__ = [
    "ArtifactCoordinates",
    "RemoteArtifactDescriptor",
    "SidecarDescriptor",
    "ProcessAction",
    "ProcessResult",
    "ScanFailure",
    "ScanReport",
    "ExportStatus",
    "ExportResult",
]
