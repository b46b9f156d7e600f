"""Client for the remote artifact metadata endpoint."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, Optional

import httpx

from tfa.modules.artifactfetch.domain import ArtifactCoordinates, RemoteArtifactDescriptor
from tfa.modules.artifactfetch.domain.constants import (
    KEY_ARTEFACT_ID,
    KEY_EXTENSION,
    KEY_GROUP_ID,
    KEY_URL,
    KEY_VERSION,
    METADATA_FIELDS,
)
from tfa.modules.artifactfetch.fileget.downloader import build_http_client
from tfa.modules.artifactfetch.util.exceptions import (
    MetadataFieldMissingError,
    MetadataUnavailableError,
)
from tfa.settings import Settings


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def first_text(root: ET.Element, tag: str) -> Optional[str]:
    """Text of the first element named ``tag`` in document order."""
    for element in root.iter():
        if isinstance(element.tag, str) and _local_name(element.tag) == tag:
            return (element.text or "").strip()
    return None


class RemoteMetadataClient:
    """Look up download location and canonical coordinates for an artifact."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.settings = settings
        self.base_url = (settings.tfa_remote_base_url or "").rstrip("/")
        self.log = logging.getLogger(self.__class__.__name__)
        self._client = client or build_http_client(settings)

    def build_query_url(self, coords: ArtifactCoordinates, base_url: Optional[str] = None) -> str:
        base = (base_url or self.base_url).rstrip("/")
        if not base:
            raise MetadataUnavailableError("no metadata base url configured (tfa_remote_base_url)")
        return f"{base}/files/{coords.groupid}/{coords.artifactid}/{coords.version}/"

    def fetch_descriptor(
        self,
        coords: ArtifactCoordinates,
        base_url: Optional[str] = None,
    ) -> RemoteArtifactDescriptor:
        coords.validate()
        url = self.build_query_url(coords, base_url)
        self.log.info("Querying metadata for %s: %s", coords, url)
        try:
            resp = self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise MetadataUnavailableError(f"metadata request {url} failed: {exc}") from exc

        fields = self.parse_document(resp.content, url)
        descriptor = RemoteArtifactDescriptor(
            groupid=fields[KEY_GROUP_ID],
            artifactid=fields[KEY_ARTEFACT_ID],
            version=fields[KEY_VERSION],
            extension=fields[KEY_EXTENSION],
            url=fields[KEY_URL],
        )
        self.log.debug("Resolved %s to %s", coords, descriptor.url)
        return descriptor

    @staticmethod
    def parse_document(body: bytes, source: str = "") -> Dict[str, str]:
        """Extract the required descriptor fields from a metadata document."""
        try:
            root = ET.fromstring(body)
        except ET.ParseError as exc:
            raise MetadataUnavailableError(f"metadata response from {source} is not XML: {exc}") from exc

        fields: Dict[str, str] = {}
        for name in METADATA_FIELDS:
            value = first_text(root, name)
            if not value:
                raise MetadataFieldMissingError(name, source or None)
            fields[name] = value
        return fields

    def close(self) -> None:
        self._client.close()
