"""FastAPI routes exposing the scan and export flows."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request

from tfa.modules.artifactfetch.domain import ArtifactCoordinates
from tfa.modules.artifactfetch.service import ExportOrchestrator, RepositoryFinder
from tfa.modules.artifactfetch.util.exceptions import (
    MetadataFieldMissingError,
    MetadataUnavailableError,
    MissingCoordinateError,
    TfaError,
)

router = APIRouter(prefix="/artifactfetch", tags=["artifact-fetch"])


def get_finder(request: Request) -> RepositoryFinder:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "finder", None):
        raise HTTPException(status_code=500, detail="Artifact finder not initialized.")
    return container.finder


def get_exporter(request: Request) -> ExportOrchestrator:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "exporter", None):
        raise HTTPException(status_code=500, detail="Export service not initialized.")
    return container.exporter


def _require_dir(value: Any, name: str) -> Path:
    if not isinstance(value, str) or not value.strip():
        raise HTTPException(status_code=400, detail=f"{name} must be a non-empty string")
    path = Path(value)
    if not path.is_dir():
        raise HTTPException(status_code=400, detail=f"{name} {value} is not a directory")
    return path


@router.post("/scan")
async def scan(payload: Dict[str, Any], finder: RepositoryFinder = Depends(get_finder)) -> Dict[str, Any]:
    directory = _require_dir(payload.get("directory"), "directory")
    report = finder.run(directory)
    return report.as_dict()


@router.post("/export")
async def export(payload: Dict[str, Any], exporter: ExportOrchestrator = Depends(get_exporter)) -> Dict[str, Any]:
    coords = ArtifactCoordinates(
        groupid=str(payload.get("groupId") or "").strip(),
        artifactid=str(payload.get("artefactId") or "").strip(),
        version=str(payload.get("version") or "").strip(),
    )
    working_dir = _require_dir(payload.get("workingDir"), "workingDir")
    try:
        result = exporter.export(coords, base_url=payload.get("baseUrl"), working_dir=working_dir)
    except MissingCoordinateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except (MetadataUnavailableError, MetadataFieldMissingError) as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except TfaError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return result.as_dict()


@router.get("/exported")
async def exported(workingDir: str, exporter: ExportOrchestrator = Depends(get_exporter)) -> List[Dict[str, str]]:
    working_dir = _require_dir(workingDir, "workingDir")
    return [descriptor.as_pairs() for descriptor in exporter.list_exported(working_dir)]
