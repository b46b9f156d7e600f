"""Directory walk feeding candidate files to the cache substitutor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator, Optional

from tfa.modules.artifactfetch.domain import ProcessAction, ScanFailure, ScanReport
from tfa.modules.artifactfetch.service.substitutor import CacheSubstitutor
from tfa.modules.artifactfetch.util.exceptions import TfaError

log = logging.getLogger(__name__)


def iter_candidate_files(
    directory: Path, on_error: Optional[Callable[[Path, OSError], None]] = None
) -> Iterator[Path]:
    """Yield regular files below ``directory`` in sorted order.

    Directories whose name starts with ``.`` are not entered. A directory
    that cannot be listed is handed to ``on_error`` and skipped; without a
    callback the ``OSError`` propagates.
    """
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        if on_error is None:
            raise
        on_error(directory, exc)
        return
    for entry in entries:
        if entry.is_dir():
            if entry.name.startswith("."):
                log.debug("Ignoring hidden directory %s", entry)
                continue
            if entry.is_symlink():
                log.debug("Not following symlinked directory %s", entry)
                continue
            yield from iter_candidate_files(entry, on_error)
        elif entry.is_file():
            yield entry


class RepositoryFinder:
    def __init__(self, substitutor: CacheSubstitutor) -> None:
        self.substitutor = substitutor

    def run(self, directory: Path) -> ScanReport:
        directory = Path(directory)
        log.info("Starting finder at: %s", directory)
        report = ScanReport(root=directory)

        def unreadable(path: Path, exc: OSError) -> None:
            log.error("Cannot list %s: %s", path, exc)
            report.failures.append(ScanFailure(file_path=path, error=str(exc)))

        for file_path in iter_candidate_files(directory, on_error=unreadable):
            try:
                result = self.substitutor.process(file_path)
            except (TfaError, OSError) as exc:
                log.error("Failed to process %s: %s", file_path, exc)
                report.failures.append(ScanFailure(file_path=file_path, error=str(exc)))
                continue
            report.results.append(result)
        log.info(
            "Finder done at %s: %d substituted, %d fetched, %d failed",
            directory,
            report.count(ProcessAction.SUBSTITUTED_FROM_CACHE),
            report.count(ProcessAction.FETCH_TRIGGERED),
            len(report.failures),
        )
        return report
