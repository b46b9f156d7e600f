from .downloader import ArtifactDownloader, build_http_client
from .metadata_client import RemoteMetadataClient

__all__ = ["ArtifactDownloader", "RemoteMetadataClient", "build_http_client"]
