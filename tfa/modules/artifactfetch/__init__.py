"""Artifact fetch module exports."""

from .service import CacheSubstitutor, ExportOrchestrator, RepositoryFinder
from .controller import router as artifactfetch_router

__all__ = ["CacheSubstitutor", "ExportOrchestrator", "RepositoryFinder", "artifactfetch_router"]
