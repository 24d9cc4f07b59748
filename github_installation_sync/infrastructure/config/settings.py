"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ..adapters.github import GitHubAppConfig


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _env_int_list(key: str) -> list[int]:
    """Get comma-separated integers from environment variable."""
    return [int(part) for part in os.environ.get(key, "").split(",") if part.strip()]


@dataclass
class Settings:
    """Application settings container."""

    # GitHub App
    github_app_id: str = field(default_factory=lambda: _env_str("GITHUB_APP_ID"))
    github_app_private_key: str = field(default_factory=lambda: _env_str("GITHUB_APP_PRIVATE_KEY"))
    github_api_url: str = field(default_factory=lambda: _env_str("GITHUB_API_URL", "https://api.github.com"))
    github_page_size: int = field(default_factory=lambda: _env_int("GITHUB_PAGE_SIZE", 100))
    http_timeout: float = field(default_factory=lambda: _env_float("HTTP_TIMEOUT", 30.0))

    # Credential store
    credential_store_path: str = field(
        default_factory=lambda: _env_str("CREDENTIAL_STORE_PATH", "installations.json")
    )
    installation_ids: list[int] = field(default_factory=lambda: _env_int_list("INSTALLATION_IDS"))

    # Run configuration
    run_mode: str = field(default_factory=lambda: _env_str("RUN_MODE", "once"))
    cron_schedule: str = field(default_factory=lambda: _env_str("CRON_SCHEDULE", "0 * * * *"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    # API settings
    api_enabled: bool = field(default_factory=lambda: _env_bool("API_ENABLED"))
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", 8080))

    def validate(self) -> None:
        """Validate required settings."""
        missing: list[str] = []

        if not self.github_app_id:
            missing.append("GITHUB_APP_ID")
        if not self.github_app_private_key:
            missing.append("GITHUB_APP_PRIVATE_KEY")

        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ValueError(msg)

        if not 0 < self.github_page_size <= 100:
            msg = f"GITHUB_PAGE_SIZE must be between 1 and 100, got {self.github_page_size}"
            raise ValueError(msg)

    @cached_property
    def github_config(self) -> GitHubAppConfig:
        """Get GitHub App configuration."""
        return GitHubAppConfig(
            app_id=self.github_app_id,
            private_key=self.github_app_private_key,
            api_url=self.github_api_url,
            timeout=self.http_timeout,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
