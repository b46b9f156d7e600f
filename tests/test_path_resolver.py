from pathlib import Path

import pytest

from tfa.modules.artifactfetch.domain import ArtifactCoordinates
from tfa.modules.artifactfetch.repository import RepositoryPathResolver, resolve_cache_path
from tfa.modules.artifactfetch.util.exceptions import MissingCoordinateError


def test_group_dots_become_directories(tmp_path):
    coords = ArtifactCoordinates(groupid="a.b.c", artifactid="widget", version="1.0.0")

    directory, file_name = resolve_cache_path(coords, tmp_path, ".js")

    assert directory == tmp_path / "a" / "b" / "c" / "widget" / "1.0.0"
    assert file_name == "widget-1.0.0.js"


def test_only_group_dots_are_transformed(tmp_path):
    coords = ArtifactCoordinates(
        groupid="org.cccs.jslibs", artifactid="jquery.collapsible", version="1.0.0-rc_1"
    )

    directory, file_name = resolve_cache_path(coords, tmp_path, ".min.js")

    assert directory.relative_to(tmp_path).parts == (
        "org",
        "cccs",
        "jslibs",
        "jquery.collapsible",
        "1.0.0-rc_1",
    )
    assert file_name == "jquery.collapsible-1.0.0-rc_1.min.js"


def test_resolution_is_deterministic(tmp_path):
    coords = ArtifactCoordinates(groupid="org.example", artifactid="widget", version="2")
    assert resolve_cache_path(coords, tmp_path, ".css") == resolve_cache_path(coords, tmp_path, ".css")


def test_empty_extension_is_allowed(tmp_path):
    coords = ArtifactCoordinates(groupid="org.example", artifactid="Makefile", version="3")
    _, file_name = resolve_cache_path(coords, tmp_path, "")
    assert file_name == "Makefile-3"


@pytest.mark.parametrize(
    "groupid, artifactid, version",
    [
        ("", "widget", "1"),
        ("org.example", "", "1"),
        ("org.example", "widget", ""),
        ("org..example", "widget", "1"),
    ],
)
def test_missing_coordinates_are_rejected(tmp_path, groupid, artifactid, version):
    coords = ArtifactCoordinates(groupid=groupid, artifactid=artifactid, version=version)
    with pytest.raises(MissingCoordinateError):
        resolve_cache_path(coords, tmp_path, ".js")


def test_resolver_binds_repository_root():
    resolver = RepositoryPathResolver(Path("/repo"))
    coords = ArtifactCoordinates(groupid="x.y", artifactid="z", version="1")
    assert resolver.cache_file(coords, ".txt") == Path("/repo/x/y/z/1/z-1.txt")
