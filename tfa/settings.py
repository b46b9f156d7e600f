"""Runtime configuration for the tfa artifact fetcher."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_tfa_home() -> str:
    return str(Path.home() / ".tfa")


class Settings(BaseSettings):
    """Configuration values mapped from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field("TFA Artifact Fetcher")
    version: str = Field("0.0.1")

    # Local repository layout
    tfa_home: str = Field(default_factory=_default_tfa_home)
    tfa_repository_root: Optional[str] = Field(None)

    # Header convention
    tfa_managed_marker: str = Field("@tfamanaged")

    # Export flow
    tfa_remote_base_url: Optional[str] = Field(None)
    tfa_state_dir: str = Field(".state")
    tfa_sidecar_suffix: str = Field("tfa")

    # Transport. Certificates are not verified unless tfa_verify_tls is set.
    tfa_verify_tls: bool = Field(False)
    tfa_strict_status: bool = Field(False)
    tfa_http_timeout: float = Field(30.0)

    tfa_log_level: str = Field("INFO")

    @property
    def repository_root(self) -> Path:
        if self.tfa_repository_root:
            return Path(self.tfa_repository_root)
        return Path(self.tfa_home) / "repository"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
