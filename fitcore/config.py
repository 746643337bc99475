"""Application configuration with environment-specific profiles.

Supports dev, staging, production and test environments via APP_ENV.
All values can be overridden by environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Settings:
    """Immutable application settings resolved from environment."""

    app_env: str = "dev"
    log_level: str = "INFO"

    # Request throttling
    rate_limit_enabled: bool = True
    rate_limit_default_requests: int = 50
    rate_limit_window_ms: int = 60_000
    profile_update_requests: int = 10

    request_id_header_name: str = "X-Request-ID"
    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:4321"])

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def is_dev(self) -> bool:
        return self.app_env == "dev"


# -- Environment profiles --

_ENV_PROFILES: dict[str, dict] = {
    "dev": {
        "log_level": "DEBUG",
    },
    "staging": {
        "log_level": "INFO",
    },
    "production": {
        "log_level": "WARNING",
        "rate_limit_default_requests": 50,
        "profile_update_requests": 10,
    },
    "test": {
        "log_level": "WARNING",
        "rate_limit_enabled": False,
    },
}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def get_settings() -> Settings:
    """Build Settings by merging environment profile with env-var overrides."""
    app_env = os.getenv("APP_ENV", "dev")
    profile = _ENV_PROFILES.get(app_env, _ENV_PROFILES["dev"])

    return Settings(
        app_env=app_env,
        log_level=os.getenv("LOG_LEVEL", profile.get("log_level", "INFO")),
        rate_limit_enabled=_env_bool("RATE_LIMIT_ENABLED", profile.get("rate_limit_enabled", True)),
        rate_limit_default_requests=int(
            os.getenv("RATE_LIMIT_DEFAULT_REQUESTS", str(profile.get("rate_limit_default_requests", 50)))
        ),
        rate_limit_window_ms=int(os.getenv("RATE_LIMIT_WINDOW_MS", "60000")),
        profile_update_requests=int(
            os.getenv("PROFILE_UPDATE_REQUESTS", str(profile.get("profile_update_requests", 10)))
        ),
        request_id_header_name=os.getenv("REQUEST_ID_HEADER", "X-Request-ID"),
        cors_origins=_env_list("CORS_ORIGINS", ["http://localhost:4321"]),
    )
