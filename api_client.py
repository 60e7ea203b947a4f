import httpx
from typing import Optional
import config
from config import AppConfig, HttpSettings, resolve_config


def _seconds(milliseconds: Optional[int]) -> Optional[float]:
    if milliseconds is None:
        return None
    return milliseconds / 1000


class APIClient:
    """HTTP client configuration for the application under test"""

    def __init__(self, app_config: AppConfig, settings: HttpSettings):
        self.base_url = app_config.app_url.rstrip("/")
        self.timeout = httpx.Timeout(
            None,
            connect=_seconds(settings.connect_timeout),
            read=_seconds(settings.read_timeout),
        )
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    @classmethod
    def from_env(cls, env: Optional[str] = None) -> "APIClient":
        """Resolve the environment into the shared settings and build a client"""
        settings = config.http_settings
        app_config = resolve_config(env, settings=settings)
        return cls(app_config, settings)

    def url(self, endpoint: str) -> str:
        """Absolute URL for an API endpoint (e.g., /employees)"""
        return f"{self.base_url}{endpoint}"

    def session(self) -> httpx.AsyncClient:
        """New AsyncClient bound to the base URL. Caller must close it."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
        )
