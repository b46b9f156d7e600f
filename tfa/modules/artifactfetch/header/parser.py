"""Leading comment header parsing for tfa managed files.

A managed file carries the marker token on its first line and declares its
coordinates inside the first block comment::

    // @tfamanaged
    /*
     * @groupId >= org.cccs.jslibs
     * @artefactId >= jquery.collapsible
     * @version >= 1.0.0
     */
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

from tfa.modules.artifactfetch.domain.constants import (
    ASSIGN_MARKER,
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    DEFAULT_MANAGED_MARKER,
    ENTRY_MARKER,
    LINE_COMMENT,
)

log = logging.getLogger(__name__)


class _State(Enum):
    NOT_STARTED = 0
    IN_HEADER = 1
    DONE = 2


class HeaderParser:
    """Line oriented state machine over the leading comment block."""

    def __init__(self, marker: str = DEFAULT_MANAGED_MARKER) -> None:
        self.marker = marker

    def is_managed(self, lines: Iterable[str]) -> bool:
        """Check only the first line for the management marker."""
        first = next(iter(lines), None)
        if first is None:
            return False
        return self.marker in first

    def parse_header(self, lines: Iterable[str]) -> Dict[str, str]:
        values: Dict[str, str] = {}
        state = _State.NOT_STARTED
        for raw_line in lines:
            line = raw_line.strip()
            if state is _State.NOT_STARTED:
                if not line or line.startswith(LINE_COMMENT):
                    continue
                if not line.startswith(BLOCK_COMMENT_OPEN):
                    log.debug("No opening comment header, stopped at %r", line)
                    return {}
                state = _State.IN_HEADER
                continue

            if line.endswith(BLOCK_COMMENT_CLOSE):
                state = _State.DONE
                break

            entry = self._parse_entry(line)
            if entry:
                key, value = entry
                values[key] = value
        return values

    @staticmethod
    def _parse_entry(line: str) -> tuple[str, str] | None:
        if ENTRY_MARKER not in line or ASSIGN_MARKER not in line:
            return None
        at = line.index(ENTRY_MARKER)
        assign = line.index(ASSIGN_MARKER)
        if at > assign:
            return None
        key = line[at + len(ENTRY_MARKER):assign].strip()
        if not key:
            return None
        value = line[assign + len(ASSIGN_MARKER):].strip()
        return key, value

    # ------------------------------------------------------------------ file helpers
    def read_lines(self, path: Path) -> List[str]:
        return path.read_text(encoding="utf-8", errors="ignore").splitlines()

    def iter_first_line(self, path: Path) -> Iterator[str]:
        with open(path, "r", encoding="utf-8", errors="ignore") as fh:
            first = fh.readline()
        if first:
            yield first

    def is_managed_file(self, path: Path) -> bool:
        return self.is_managed(self.iter_first_line(path))

    def parse_file(self, path: Path) -> Dict[str, str]:
        """Parse the header that follows the marker line.

        The first line belongs to the managed check and is not part of the
        header scan, so a bare ``@tfamanaged`` line may precede the block.
        """
        return self.parse_header(self.read_lines(path)[1:])
