import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Environment selector (system property name first, shell-friendly name second)
ENV_VARIABLES = ("karate.env", "KARATE_ENV")
DEFAULT_ENV = "dev"

# Base API URL per environment
DEFAULT_APP_URL = "http://localhost:8080/api"
ENV_URLS: dict[str, str] = {
    "dev": "http://localhost:8080/api",
    "test": "http://localhost:8080/api",
    "karate": "http://localhost:8082/api",
    "karate-admin": "http://localhost:8081/api",
}

# HTTP timeouts (milliseconds)
CONNECT_TIMEOUT_MS = 5000
READ_TIMEOUT_MS = 5000


@dataclass(frozen=True)
class AppConfig:
    """Configuration record handed to the test harness"""
    app_url: str

    def as_dict(self) -> dict[str, str]:
        return {"appUrl": self.app_url}


@dataclass
class HttpSettings:
    """Timeout settings shared with the harness HTTP client (milliseconds)"""
    connect_timeout: Optional[int] = None
    read_timeout: Optional[int] = None

    _KEYS = {
        "connectTimeout": "connect_timeout",
        "readTimeout": "read_timeout",
    }

    def configure(self, key: str, value: int) -> None:
        """Apply a setting by its harness key"""
        setattr(self, self._KEYS[key], value)


# Process-wide settings, written once per run by resolve_config()
http_settings = HttpSettings()


def read_env_name() -> Optional[str]:
    """Raw environment selector, or None when nothing was supplied"""
    for name in ENV_VARIABLES:
        value = os.getenv(name)
        if value is not None:
            return value
    return None


def resolve_config(
    env: Optional[str] = None,
    urls: Optional[Mapping[str, str]] = None,
    settings: Optional[HttpSettings] = None,
) -> AppConfig:
    """Resolve the base URL for an environment and apply the HTTP timeouts.

    Args:
        env: Environment name. Read from karate.env / KARATE_ENV when omitted.
        urls: Extra or replacement entries merged over ENV_URLS.
        settings: Settings object receiving the timeouts (default: http_settings)
    """
    if env is None:
        env = read_env_name()
    logger.info("karate.env system property was: %s", env)

    if not env:
        env = DEFAULT_ENV

    table = dict(ENV_URLS)
    if urls:
        table.update(urls)

    app_url = DEFAULT_APP_URL
    for name, url in table.items():
        if env == name:
            app_url = url
            break

    if settings is None:
        settings = http_settings
    settings.configure("connectTimeout", CONNECT_TIMEOUT_MS)
    settings.configure("readTimeout", READ_TIMEOUT_MS)

    return AppConfig(app_url=app_url)
