from .exporter import ExportOrchestrator
from .finder import RepositoryFinder, iter_candidate_files
from .substitutor import CacheSubstitutor

__all__ = ["CacheSubstitutor", "ExportOrchestrator", "RepositoryFinder", "iter_candidate_files"]
