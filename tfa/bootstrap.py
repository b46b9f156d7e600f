"""Bootstrap logic: tfa home creation and service wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from tfa.modules.artifactfetch.fileget import ArtifactDownloader, RemoteMetadataClient, build_http_client
from tfa.modules.artifactfetch.header import HeaderParser
from tfa.modules.artifactfetch.service import CacheSubstitutor, ExportOrchestrator, RepositoryFinder
from tfa.modules.artifactfetch.state import DescriptorStore
from tfa.modules.artifactfetch.util.exceptions import RepositoryRootError

from .settings import Settings

log = logging.getLogger(__name__)


def ensure_tfa_home(settings: Settings) -> Path:
    """Create the tfa home and repository root if missing.

    Failure here is fatal for the process, unlike per-file failures.
    """
    home_dir = Path(settings.tfa_home)
    repo_dir = settings.repository_root
    try:
        if not home_dir.is_dir():
            log.info("No tfa home, creating %s...", home_dir)
            home_dir.mkdir(parents=True, exist_ok=True)
        if not repo_dir.is_dir():
            log.info("No tfa repository home, creating %s...", repo_dir)
            repo_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RepositoryRootError(f"cannot create repository root {repo_dir}: {exc}") from exc
    return repo_dir


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    client: httpx.Client | None = None
    parser: HeaderParser = field(init=False)
    downloader: ArtifactDownloader = field(init=False)
    metadata_client: RemoteMetadataClient = field(init=False)
    descriptor_store: DescriptorStore = field(init=False)
    substitutor: CacheSubstitutor = field(init=False)
    finder: RepositoryFinder = field(init=False)
    exporter: ExportOrchestrator = field(init=False)

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = build_http_client(self.settings)
        self.parser = HeaderParser(self.settings.tfa_managed_marker)
        self.downloader = ArtifactDownloader(self.settings, client=self.client)
        self.metadata_client = RemoteMetadataClient(self.settings, client=self.client)
        self.descriptor_store = DescriptorStore(self.settings.tfa_sidecar_suffix)
        self.substitutor = CacheSubstitutor(
            self.settings.repository_root,
            self.downloader,
            parser=self.parser,
            metadata_client=self.metadata_client,
        )
        self.finder = RepositoryFinder(self.substitutor)
        self.exporter = ExportOrchestrator(
            self.metadata_client,
            self.descriptor_store,
            self.downloader,
            state_dir=self.settings.tfa_state_dir,
        )

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
