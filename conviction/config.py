"""Configuration for the conviction client."""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

from .network import DocumentNetwork
from .types import PublicConfig

DEFAULT_HTTP_TIMEOUT = 10.0


class Settings(BaseSettings):
    """Client settings loaded from environment (``CONVICTION_*``)."""

    # Root of the conviction service (serves the public config)
    service_uri: Optional[str] = None
    # Timeout for requests to the service, in seconds
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    class Config:
        env_prefix = "CONVICTION_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@dataclass(frozen=True)
class Session:
    """Everything an operation needs, fixed once the client is connected."""

    network: DocumentNetwork
    service_uri: str
    config: PublicConfig
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    @property
    def did(self) -> Optional[str]:
        return self.network.did
