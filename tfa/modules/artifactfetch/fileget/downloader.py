"""HTTP client that streams artifact payloads to the local filesystem."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

import httpx

from tfa.modules.artifactfetch.util.exceptions import CacheWriteFailedError, DownloadFailedError
from tfa.settings import Settings


def build_http_client(settings: Settings) -> httpx.Client:
    """Create the shared client.

    Certificate verification follows ``tfa_verify_tls`` which defaults to
    off: HTTPS endpoints with self-signed certificates are accepted.
    """
    return httpx.Client(
        timeout=settings.tfa_http_timeout,
        verify=settings.tfa_verify_tls,
        follow_redirects=True,
    )


class ArtifactDownloader:
    """Download artifact payloads from plain or TLS endpoints."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.settings = settings
        self.strict_status = settings.tfa_strict_status
        self.log = logging.getLogger(self.__class__.__name__)
        self._client = client or build_http_client(settings)
        if not settings.tfa_verify_tls:
            self.log.debug("TLS certificate verification is disabled (tfa_verify_tls=false)")

    def download(self, url: str, destination: Path) -> int:
        """Write the body returned for ``url`` to ``destination``.

        The body is streamed into ``<destination>.part`` and moved over
        ``destination`` only once complete; a failed transfer leaves no file
        behind and does not touch an existing ``destination``. Error statuses
        are logged and their body is written like any other unless
        ``tfa_strict_status`` is set, in which case they raise
        ``DownloadFailedError``.
        """
        destination = Path(destination)
        partial = destination.with_name(destination.name + ".part")
        self.log.info("Downloading %s -> %s", url, destination)
        start_time = time.time()
        try:
            downloaded = self._stream_to(url, partial)
            partial.replace(destination)
        except httpx.HTTPError as exc:
            partial.unlink(missing_ok=True)
            raise DownloadFailedError(f"GET {url} failed: {exc}") from exc
        except OSError as exc:
            partial.unlink(missing_ok=True)
            raise CacheWriteFailedError(f"cannot write {destination}: {exc}") from exc
        except DownloadFailedError:
            partial.unlink(missing_ok=True)
            raise

        elapsed = max(time.time() - start_time, 1e-3)
        speed_mb_s = (downloaded / 1024 / 1024) / elapsed
        self.log.info(
            "Downloaded %s -> %s (%d bytes, %.2f MB/s, %.2fs)",
            url,
            destination,
            downloaded,
            speed_mb_s,
            elapsed,
        )
        return downloaded

    def _stream_to(self, url: str, target: Path) -> int:
        downloaded = 0
        with self._client.stream("GET", url) as response:
            if response.is_error:
                if self.strict_status:
                    raise DownloadFailedError(f"GET {url} returned HTTP {response.status_code}")
                self.log.warning("GET %s returned HTTP %s, writing body anyway", url, response.status_code)
            total = int(response.headers.get("content-length") or 0)
            next_percent = 10
            with open(target, "wb") as fh:
                for chunk in response.iter_bytes(65536):
                    if not chunk:
                        continue
                    fh.write(chunk)
                    downloaded += len(chunk)
                    if total:
                        percent = int(downloaded * 100 / total)
                        if percent >= next_percent:
                            self.log.debug(
                                "Download progress %s %s%% (%d/%d bytes)",
                                target.name,
                                percent,
                                downloaded,
                                total,
                            )
                            next_percent += 10
        return downloaded

    def close(self) -> None:
        self._client.close()
