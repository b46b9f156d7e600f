"""Mapping from artifact coordinates to the local repository layout."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from tfa.modules.artifactfetch.domain import ArtifactCoordinates


def cache_file_name(coords: ArtifactCoordinates, extension: str) -> str:
    return f"{coords.artifactid}-{coords.version}{extension}"


def resolve_cache_path(coords: ArtifactCoordinates, repo_root: Path, extension: str) -> Tuple[Path, str]:
    """Return ``(directory, file_name)`` for ``coords`` under ``repo_root``.

    ``extension`` is appended verbatim, so callers pass it with its leading
    dot (``".js"``). Raises ``MissingCoordinateError`` for empty fields.
    """
    coords.validate()
    directory = Path(repo_root).joinpath(*coords.group_segments, coords.artifactid, coords.version)
    return directory, cache_file_name(coords, extension)


class RepositoryPathResolver:
    """Binds ``resolve_cache_path`` to a repository root."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = Path(repo_root)

    def resolve(self, coords: ArtifactCoordinates, extension: str) -> Tuple[Path, str]:
        return resolve_cache_path(coords, self.repo_root, extension)

    def cache_file(self, coords: ArtifactCoordinates, extension: str) -> Path:
        directory, file_name = self.resolve(coords, extension)
        return directory / file_name
