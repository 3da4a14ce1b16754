from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://www.twinjet.co/api/v1"
DEFAULT_TIMEOUT_MS = 10000
DEFAULT_LIVE = True


@dataclass(frozen=True)
class ClientOptions:
    """User-facing options. Anything left as None falls back to the defaults."""

    # API token issued by the courier company; identifies and authenticates you.
    api_token: Optional[str] = None
    base_url: Optional[str] = None
    # Request timeout in milliseconds.
    timeout: Optional[int] = None
    # Whether created jobs should be processed by TwinJet.
    live: Optional[bool] = None


@dataclass(frozen=True)
class ClientConfiguration:
    """Effective configuration, resolved once when the client is built."""
    api_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT_MS
    live: bool = DEFAULT_LIVE

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0
