#!/usr/bin/env python3
"""
GitHub Installation Sync

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import UTC, datetime
from functools import cached_property
from typing import TYPE_CHECKING

from croniter import croniter

from . import __version__
from .application.exceptions import ConfigurationError
from .application.services import PaginationSweeper, TokenLifecycle
from .application.use_cases import InstallationOrchestrator, SyncInstallations
from .infrastructure.adapters import (
    GitHubAppAuth,
    GitHubClient,
    JsonFileCredentialStore,
)
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.use_cases import SyncResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components. The
    token lifecycle is shared so refreshes stay serialized per installation.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    @cached_property
    def credential_store(self) -> JsonFileCredentialStore:
        """Create the credential store adapter."""
        return JsonFileCredentialStore(self._settings.credential_store_path)

    @cached_property
    def github_client(self) -> GitHubClient:
        """Create the GitHub transport adapter."""
        config = self._settings.github_config
        return GitHubClient(config, GitHubAppAuth(config.app_id, config.private_key))

    @cached_property
    def token_lifecycle(self) -> TokenLifecycle:
        return TokenLifecycle(self.github_client, self.credential_store)

    @cached_property
    def orchestrator(self) -> InstallationOrchestrator:
        """Create the repository listing use case with all dependencies."""
        return InstallationOrchestrator(
            token_lifecycle=self.token_lifecycle,
            sweeper=PaginationSweeper(self.github_client, page_size=self._settings.github_page_size),
            store=self.credential_store,
        )

    def create_sync_use_case(self) -> SyncInstallations:
        """Create the sync use case for all stored installations."""
        return SyncInstallations(
            orchestrator=self.orchestrator,
            store=self.credential_store,
            installation_ids=self._settings.installation_ids,
        )


class Application:
    """
    Main application orchestrator.

    Handles run modes (single execution, scheduled, or API) and lifecycle.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def run_once(self) -> SyncResult:
        """Execute a single sync of all installations."""
        use_case = self._container.create_sync_use_case()
        return await use_case.execute()

    async def run_scheduled(self) -> None:
        """Run in scheduled mode with cron expression."""
        logger.info("Starting scheduled mode with cron: %s", self._settings.cron_schedule)

        logger.info("Running initial sync on startup...")
        await self.run_once()

        cron = croniter(self._settings.cron_schedule, datetime.now(UTC))

        while True:
            next_run = cron.get_next(datetime)
            now = datetime.now(UTC)

            # croniter may hand back naive datetimes
            if next_run.tzinfo is None:
                next_run = next_run.replace(tzinfo=UTC)

            sleep_seconds = (next_run - now).total_seconds()

            if sleep_seconds > 0:
                logger.info("Next sync scheduled for %s", next_run.isoformat())
                await asyncio.sleep(sleep_seconds)

            logger.info("Running scheduled sync...")
            await self.run_once()

    def run_api(self) -> None:
        """Run in API server mode."""
        import uvicorn

        from .infrastructure.adapters.api import create_app

        logger.info(
            "Starting API server on %s:%d",
            self._settings.api_host,
            self._settings.api_port,
        )

        app = create_app(
            self._container.orchestrator,
            self._container.credential_store,
            version=__version__,
        )

        uvicorn.run(
            app,
            host=self._settings.api_host,
            port=self._settings.api_port,
            log_level=self._settings.log_level.lower(),
        )

    async def run(self) -> int:
        """
        Run the application based on configured mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        match self._settings.run_mode.lower():
            case "once":
                logger.info("Running in single-execution mode")
                result = await self.run_once()
                return 0 if result.success else 1

            case "scheduled":
                await self.run_scheduled()
                return 0  # Never reached in scheduled mode

            case _:
                logger.error(
                    "Invalid RUN_MODE: %s (use 'once', 'scheduled', or set API_ENABLED=true)",
                    self._settings.run_mode,
                )
                return 1


async def async_main(settings: Settings) -> int:
    """Async entry point."""
    try:
        return await Application(settings).run()
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    logger.info("GitHub Installation Sync %s starting...", __version__)

    try:
        settings = load_settings()
    except (ValueError, ConfigurationError) as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level.upper())

    # uvicorn owns the event loop in API mode
    if settings.api_enabled:
        try:
            Application(settings).run_api()
        except ConfigurationError as e:
            logger.error("Configuration error: %s", e)
            sys.exit(1)
        sys.exit(0)

    sys.exit(asyncio.run(async_main(settings)))


if __name__ == "__main__":
    main()
