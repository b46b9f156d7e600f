"""Coordinate and descriptor objects for tfa managed artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping

from tfa.modules.artifactfetch.domain.constants import (
    KEY_ARTEFACT_ID,
    KEY_FILE_NAME,
    KEY_GROUP_ID,
    KEY_URL,
    KEY_VERSION,
    SIDECAR_FIELDS,
)
from tfa.modules.artifactfetch.util.exceptions import MissingCoordinateError


@dataclass(frozen=True)
class ArtifactCoordinates:
    """A group/artifact/version triple."""

    groupid: str
    artifactid: str
    version: str

    @classmethod
    def from_header(cls, values: Mapping[str, str]) -> "ArtifactCoordinates":
        """Build coordinates from parsed header values.

        Raises ``MissingCoordinateError`` when any of ``groupId``,
        ``artefactId`` or ``version`` is absent or blank.
        """
        missing = [
            key
            for key in (KEY_GROUP_ID, KEY_ARTEFACT_ID, KEY_VERSION)
            if not (values.get(key) or "").strip()
        ]
        if missing:
            raise MissingCoordinateError(f"header is missing {', '.join(missing)}")
        return cls(
            groupid=values[KEY_GROUP_ID].strip(),
            artifactid=values[KEY_ARTEFACT_ID].strip(),
            version=values[KEY_VERSION].strip(),
        )

    @property
    def group_segments(self) -> List[str]:
        return self.groupid.split(".")

    def validate(self) -> None:
        if not self.groupid:
            raise MissingCoordinateError("groupId is empty")
        if not self.artifactid:
            raise MissingCoordinateError("artefactId is empty")
        if not self.version:
            raise MissingCoordinateError("version is empty")
        if any(not segment for segment in self.group_segments):
            raise MissingCoordinateError(f"groupId {self.groupid!r} contains an empty segment")

    def __str__(self) -> str:
        return f"{self.groupid}:{self.artifactid}:{self.version}"


@dataclass(frozen=True)
class RemoteArtifactDescriptor:
    """Artifact location and coordinates as reported by the metadata endpoint."""

    groupid: str
    artifactid: str
    version: str
    extension: str
    url: str

    @property
    def coordinates(self) -> ArtifactCoordinates:
        return ArtifactCoordinates(groupid=self.groupid, artifactid=self.artifactid, version=self.version)

    @property
    def file_name(self) -> str:
        return f"{self.artifactid}-{self.version}.{self.extension.lstrip('.')}"

    def to_sidecar(self) -> "SidecarDescriptor":
        return SidecarDescriptor(
            groupid=self.groupid,
            artifactid=self.artifactid,
            version=self.version,
            file_name=self.file_name,
            url=self.url,
        )


@dataclass(frozen=True)
class SidecarDescriptor:
    groupid: str
    artifactid: str
    version: str
    file_name: str
    url: str

    def as_pairs(self) -> Dict[str, str]:
        """Return the persisted fields in their on-disk order."""
        return {
            KEY_GROUP_ID: self.groupid,
            KEY_ARTEFACT_ID: self.artifactid,
            KEY_VERSION: self.version,
            KEY_FILE_NAME: self.file_name,
            KEY_URL: self.url,
        }

    @classmethod
    def from_pairs(cls, values: Mapping[str, str]) -> "SidecarDescriptor":
        missing = [key for key in SIDECAR_FIELDS if key not in values]
        if missing:
            raise ValueError(f"sidecar descriptor is missing {', '.join(missing)}")
        return cls(
            groupid=values[KEY_GROUP_ID],
            artifactid=values[KEY_ARTEFACT_ID],
            version=values[KEY_VERSION],
            file_name=values[KEY_FILE_NAME],
            url=values[KEY_URL],
        )
