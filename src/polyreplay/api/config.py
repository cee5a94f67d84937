"""Configuration for the leaderboard API client."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://vps.kodub.com:43273"
DEFAULT_GAME_VERSION = "0.5.0"


@dataclass(frozen=True)
class ApiConfig:
    """Connection settings for the leaderboard service.

    Attributes:
        base_url: Service root URL, without trailing slash
        version: Game version string sent with every request
        timeout: Request timeout in seconds (default 30.0)
    """

    base_url: str = DEFAULT_BASE_URL
    version: str = DEFAULT_GAME_VERSION
    timeout: float = 30.0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {self.base_url!r}")

        if not self.version:
            raise ValueError("version must not be empty")

        if self.timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {self.timeout}")
