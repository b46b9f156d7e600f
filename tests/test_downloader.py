import httpx
import pytest

from tfa.modules.artifactfetch.fileget import ArtifactDownloader, build_http_client
from tfa.modules.artifactfetch.util.exceptions import DownloadFailedError
from tfa.settings import Settings


def build_settings(tmp_path, **overrides) -> Settings:
    defaults = {"tfa_home": str(tmp_path / "home")}
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


def test_download_writes_file(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/files/widget-1.0.0.js"
        return httpx.Response(200, content=b"binary-data")

    client = httpx.Client(transport=httpx.MockTransport(handler))
    downloader = ArtifactDownloader(build_settings(tmp_path), client=client)
    target = tmp_path / "widget-1.0.0.js"

    written = downloader.download("http://example.test/files/widget-1.0.0.js", target)

    assert written == len(b"binary-data")
    assert target.read_bytes() == b"binary-data"


def test_download_truncates_existing_file(tmp_path):
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"new")))
    downloader = ArtifactDownloader(build_settings(tmp_path), client=client)
    target = tmp_path / "payload.bin"
    target.write_bytes(b"a much longer previous payload")

    downloader.download("http://example.test/payload.bin", target)

    assert target.read_bytes() == b"new"


def test_error_status_body_is_written_by_default(tmp_path):
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(404, content=b"missing")))
    downloader = ArtifactDownloader(build_settings(tmp_path), client=client)
    target = tmp_path / "payload.bin"

    downloader.download("http://example.test/payload.bin", target)

    assert target.read_bytes() == b"missing"


def test_strict_status_rejects_error_responses(tmp_path):
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(500, content=b"boom")))
    downloader = ArtifactDownloader(build_settings(tmp_path, tfa_strict_status=True), client=client)
    target = tmp_path / "payload.bin"

    with pytest.raises(DownloadFailedError):
        downloader.download("http://example.test/payload.bin", target)
    assert not target.exists()


def test_transport_error_is_download_failed(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    downloader = ArtifactDownloader(build_settings(tmp_path), client=client)

    with pytest.raises(DownloadFailedError):
        downloader.download("https://example.test/payload.bin", tmp_path / "payload.bin")


class InterruptedBody(httpx.SyncByteStream):
    def __iter__(self):
        yield b"partial-"
        raise httpx.ReadError("connection reset mid-body")


def test_interrupted_stream_leaves_existing_file_untouched(tmp_path):
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, stream=InterruptedBody())))
    downloader = ArtifactDownloader(build_settings(tmp_path), client=client)
    target = tmp_path / "payload.bin"
    target.write_bytes(b"previous payload")

    with pytest.raises(DownloadFailedError):
        downloader.download("http://example.test/payload.bin", target)

    assert target.read_bytes() == b"previous payload"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["payload.bin"]


def test_tls_verification_defaults_off():
    assert Settings(_env_file=None).tfa_verify_tls is False


@pytest.mark.parametrize("overrides, expected", [({}, False), ({"tfa_verify_tls": True}, True)])
def test_http_client_receives_verify_setting(monkeypatch, overrides, expected):
    captured = {}

    class RecordingClient:
        def __init__(self, **kwargs):
            captured.update(kwargs)

    monkeypatch.setattr(httpx, "Client", RecordingClient)
    settings = Settings(_env_file=None, **overrides)

    build_http_client(settings)

    assert captured["verify"] is expected
    assert captured["timeout"] == settings.tfa_http_timeout
