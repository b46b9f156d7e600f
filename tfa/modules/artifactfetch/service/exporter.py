"""Export an artifact into a working directory by explicit coordinates."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from tfa.modules.artifactfetch.domain import (
    ArtifactCoordinates,
    ExportResult,
    ExportStatus,
    SidecarDescriptor,
)
from tfa.modules.artifactfetch.fileget import ArtifactDownloader, RemoteMetadataClient
from tfa.modules.artifactfetch.state import DescriptorStore


class ExportOrchestrator:
    """Metadata lookup, sidecar bookkeeping and payload download."""

    def __init__(
        self,
        metadata_client: RemoteMetadataClient,
        descriptor_store: DescriptorStore,
        downloader: ArtifactDownloader,
        state_dir: str = ".state",
    ) -> None:
        self.metadata_client = metadata_client
        self.descriptor_store = descriptor_store
        self.downloader = downloader
        self.state_dir = state_dir
        self.log = logging.getLogger(self.__class__.__name__)

    def storage_dir(self, working_dir: Path) -> Path:
        return Path(working_dir) / self.state_dir

    def export(
        self,
        coords: ArtifactCoordinates,
        base_url: Optional[str] = None,
        working_dir: Optional[Path] = None,
    ) -> ExportResult:
        working_dir = Path(working_dir) if working_dir is not None else Path.cwd()
        descriptor = self.metadata_client.fetch_descriptor(coords, base_url)
        sidecar_written = self.descriptor_store.write_if_absent(
            descriptor.to_sidecar(), self.storage_dir(working_dir)
        )

        target = working_dir / descriptor.file_name
        if target.exists():
            self.log.info("%s already exists in %s, not downloading", descriptor.file_name, working_dir)
            return ExportResult(
                status=ExportStatus.ALREADY_EXISTS,
                descriptor=descriptor,
                file_path=target,
                sidecar_written=sidecar_written,
            )

        written = self.downloader.download(descriptor.url, target)
        self.log.info("Exported %s to %s", coords, target)
        return ExportResult(
            status=ExportStatus.DOWNLOADED,
            descriptor=descriptor,
            file_path=target,
            sidecar_written=sidecar_written,
            bytes_written=written,
        )

    def list_exported(self, working_dir: Optional[Path] = None) -> List[SidecarDescriptor]:
        working_dir = Path(working_dir) if working_dir is not None else Path.cwd()
        return self.descriptor_store.list_descriptors(self.storage_dir(working_dir))
