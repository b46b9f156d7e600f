"""Resolve-or-fetch decision for a single tfa managed file."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Mapping, Optional

from tfa.modules.artifactfetch.domain import (
    ArtifactCoordinates,
    ProcessAction,
    ProcessResult,
)
from tfa.modules.artifactfetch.domain.constants import KEY_URL
from tfa.modules.artifactfetch.fileget import ArtifactDownloader, RemoteMetadataClient
from tfa.modules.artifactfetch.header import HeaderParser
from tfa.modules.artifactfetch.repository import RepositoryPathResolver
from tfa.modules.artifactfetch.util.exceptions import CacheWriteFailedError, TfaError


class CacheSubstitutor:
    """Replace managed files with their cached copy, or fetch them.

    Cached artifacts are reused on presence alone; there is no expiry check.
    """

    def __init__(
        self,
        repository_root: Path,
        downloader: ArtifactDownloader,
        parser: Optional[HeaderParser] = None,
        metadata_client: Optional[RemoteMetadataClient] = None,
    ) -> None:
        self.resolver = RepositoryPathResolver(repository_root)
        self.downloader = downloader
        self.parser = parser or HeaderParser()
        self.metadata_client = metadata_client
        self.log = logging.getLogger(self.__class__.__name__)

    @property
    def repository_root(self) -> Path:
        return self.resolver.repo_root

    def process(self, file_path: Path) -> ProcessResult:
        file_path = Path(file_path)
        if not self.parser.is_managed_file(file_path):
            self.log.debug("Skipping unmanaged file %s", file_path)
            return ProcessResult(file_path=file_path, action=ProcessAction.SKIPPED)

        values = self.parser.parse_file(file_path)
        coords = ArtifactCoordinates.from_header(values)
        directory, file_name = self.resolver.resolve(coords, file_path.suffix)
        cache_file = directory / file_name

        if cache_file.is_file():
            self.log.info("Getting file from local repository: %s", cache_file)
            self._substitute(cache_file, file_path)
            return ProcessResult(
                file_path=file_path,
                action=ProcessAction.SUBSTITUTED_FROM_CACHE,
                coordinates=coords,
                cache_file=cache_file,
            )

        self._ensure_directory(directory)
        remote_url = self._remote_location(coords, values)
        if not remote_url:
            self.log.warning("No remote location known for %s, cannot fetch %s", coords, cache_file)
            return ProcessResult(
                file_path=file_path,
                action=ProcessAction.FETCH_TRIGGERED,
                coordinates=coords,
                cache_file=cache_file,
            )

        self.log.info("Getting file from web: %s -> %s", remote_url, cache_file)
        try:
            written = self.downloader.download(remote_url, cache_file)
        except TfaError:
            # a partial payload must not be picked up as a cache hit later
            cache_file.unlink(missing_ok=True)
            raise
        self._substitute(cache_file, file_path)
        return ProcessResult(
            file_path=file_path,
            action=ProcessAction.FETCH_TRIGGERED,
            coordinates=coords,
            cache_file=cache_file,
            remote_url=remote_url,
            bytes_written=written,
        )

    def _remote_location(self, coords: ArtifactCoordinates, values: Mapping[str, str]) -> Optional[str]:
        declared = (values.get(KEY_URL) or "").strip()
        if declared:
            return declared
        if self.metadata_client is None or not self.metadata_client.base_url:
            return None
        return self.metadata_client.fetch_descriptor(coords).url

    def _ensure_directory(self, directory: Path) -> None:
        if directory.is_dir():
            return
        self.log.info("%s not found, creating...", directory)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CacheWriteFailedError(f"cannot create {directory}: {exc}") from exc

    def _substitute(self, cache_file: Path, file_path: Path) -> None:
        if file_path.exists() and file_path.resolve() == cache_file.resolve():
            self.log.debug("%s is the cached copy itself, nothing to replace", file_path)
            return
        try:
            file_path.unlink(missing_ok=True)
            shutil.copyfile(cache_file, file_path)
        except OSError as exc:
            raise CacheWriteFailedError(f"cannot copy {cache_file} to {file_path}: {exc}") from exc
