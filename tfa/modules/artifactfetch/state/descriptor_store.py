"""Write-once sidecar descriptors for exported artifacts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

from tfa.modules.artifactfetch.domain import SidecarDescriptor
from tfa.modules.artifactfetch.util.exceptions import CacheWriteFailedError


class DescriptorStore:
    """Persist ``key=value`` sidecars next to exported artifacts.

    A sidecar is never rewritten once it exists.
    """

    def __init__(self, suffix: str = "tfa") -> None:
        self.suffix = suffix.lstrip(".")
        self.log = logging.getLogger(self.__class__.__name__)

    def sidecar_name(self, file_name: str) -> str:
        return f"{file_name}.{self.suffix}"

    def sidecar_path(self, descriptor: SidecarDescriptor, storage_dir: Path) -> Path:
        return Path(storage_dir) / self.sidecar_name(descriptor.file_name)

    def write_if_absent(self, descriptor: SidecarDescriptor, storage_dir: Path) -> bool:
        storage_dir = Path(storage_dir)
        try:
            if not storage_dir.is_dir():
                self.log.info("%s not found, creating...", storage_dir)
                storage_dir.mkdir(parents=True, exist_ok=True)
            target = self.sidecar_path(descriptor, storage_dir)
            if target.exists():
                self.log.debug("Sidecar %s already present, leaving untouched", target)
                return False
            lines = [f"{key}={value}" for key, value in descriptor.as_pairs().items()]
            target.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as exc:
            raise CacheWriteFailedError(f"cannot write sidecar in {storage_dir}: {exc}") from exc
        self.log.info("Wrote sidecar %s", target)
        return True

    def read(self, path: Path) -> SidecarDescriptor:
        values: Dict[str, str] = {}
        for line in Path(path).read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            values[key.strip()] = value.strip()
        return SidecarDescriptor.from_pairs(values)

    def list_descriptors(self, storage_dir: Path) -> List[SidecarDescriptor]:
        storage_dir = Path(storage_dir)
        if not storage_dir.is_dir():
            return []
        descriptors: List[SidecarDescriptor] = []
        for path in sorted(storage_dir.glob(f"*.{self.suffix}")):
            try:
                descriptors.append(self.read(path))
            except ValueError as exc:
                self.log.warning("Ignoring malformed sidecar %s: %s", path, exc)
        return descriptors
