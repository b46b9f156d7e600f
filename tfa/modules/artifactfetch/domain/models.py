"""Result objects returned by the artifactfetch services."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from .artifact import ArtifactCoordinates, RemoteArtifactDescriptor


class ProcessAction(str, Enum):
    SKIPPED = "skipped"
    SUBSTITUTED_FROM_CACHE = "substituted_from_cache"
    FETCH_TRIGGERED = "fetch_triggered"


class ExportStatus(str, Enum):
    DOWNLOADED = "downloaded"
    ALREADY_EXISTS = "already_exists"


@dataclass
class ProcessResult:
    file_path: Path
    action: ProcessAction
    coordinates: Optional[ArtifactCoordinates] = None
    cache_file: Optional[Path] = None
    remote_url: Optional[str] = None
    bytes_written: Optional[int] = None

    @property
    def fetched(self) -> bool:
        return self.action is ProcessAction.FETCH_TRIGGERED and self.bytes_written is not None


@dataclass
class ScanFailure:
    file_path: Path
    error: str


@dataclass
class ScanReport:
    root: Path
    results: List[ProcessResult] = field(default_factory=list)
    failures: List[ScanFailure] = field(default_factory=list)

    def count(self, action: ProcessAction) -> int:
        return sum(1 for result in self.results if result.action is action)

    @property
    def ok(self) -> bool:
        return not self.failures

    def as_dict(self) -> Dict[str, Any]:
        return {
            "root": str(self.root),
            "skipped": self.count(ProcessAction.SKIPPED),
            "substituted": self.count(ProcessAction.SUBSTITUTED_FROM_CACHE),
            "fetched": self.count(ProcessAction.FETCH_TRIGGERED),
            "processed": [
                {
                    "file": str(result.file_path),
                    "action": result.action.value,
                    "coordinates": str(result.coordinates) if result.coordinates else None,
                    "cacheFile": str(result.cache_file) if result.cache_file else None,
                }
                for result in self.results
                if result.action is not ProcessAction.SKIPPED
            ],
            "failures": [{"file": str(f.file_path), "error": f.error} for f in self.failures],
        }


@dataclass
class ExportResult:
    status: ExportStatus
    descriptor: RemoteArtifactDescriptor
    file_path: Path
    sidecar_written: bool = False
    bytes_written: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "groupId": self.descriptor.groupid,
            "artefactId": self.descriptor.artifactid,
            "version": self.descriptor.version,
            "fileName": self.descriptor.file_name,
            "url": self.descriptor.url,
            "filePath": str(self.file_path),
            "sidecarWritten": self.sidecar_written,
            "bytesWritten": self.bytes_written,
        }
