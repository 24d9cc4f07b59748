"""Tests for environment settings."""

from __future__ import annotations

import pytest

from github_installation_sync.infrastructure.config import Settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("GITHUB_APP_ID", "GITHUB_APP_PRIVATE_KEY", "GITHUB_PAGE_SIZE", "INSTALLATION_IDS", "GITHUB_API_URL"):
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Defaults target public GitHub with full pages."""
        settings = Settings()
        assert settings.github_api_url == "https://api.github.com"
        assert settings.github_page_size == 100
        assert settings.installation_ids == []
        assert settings.run_mode == "once"

    def test_missing_required_values(self) -> None:
        """App ID and private key are required."""
        with pytest.raises(ValueError, match="GITHUB_APP_ID, GITHUB_APP_PRIVATE_KEY"):
            load_settings()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Values come from the environment."""
        monkeypatch.setenv("GITHUB_APP_ID", "42")
        monkeypatch.setenv("GITHUB_APP_PRIVATE_KEY", "/keys/app.pem")
        monkeypatch.setenv("INSTALLATION_IDS", "1, 2,3,")
        monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3")

        settings = load_settings()

        assert settings.installation_ids == [1, 2, 3]
        assert settings.github_config.app_id == "42"
        assert settings.github_config.api_url == "https://ghe.example.com/api/v3"

    def test_page_size_bounds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Page size above GitHub's maximum is rejected."""
        monkeypatch.setenv("GITHUB_APP_ID", "42")
        monkeypatch.setenv("GITHUB_APP_PRIVATE_KEY", "/keys/app.pem")
        monkeypatch.setenv("GITHUB_PAGE_SIZE", "250")

        with pytest.raises(ValueError, match="GITHUB_PAGE_SIZE"):
            load_settings()
