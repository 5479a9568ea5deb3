"""WikiTree API connection configuration."""

from dataclasses import dataclass

from wikitree_api.config import DEFAULT_BASE_URL, settings


@dataclass
class ApiConfig:
    """Configuration for talking to a WikiTree API server."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    app_id: str = "wikitree-api-python"
    show_urls: bool = False

    @classmethod
    def from_settings(cls) -> "ApiConfig":
        """Build a config from the environment / .env backed settings."""
        api = settings.api
        return cls(
            base_url=api.base_url,
            timeout=api.timeout,
            app_id=api.app_id,
            show_urls=api.show_urls,
        )

    @property
    def is_default_server(self) -> bool:
        return self.base_url == DEFAULT_BASE_URL
