"""Use case for syncing the repository lists of all stored installations."""

import logging
from dataclasses import dataclass, field

from ..ports import CredentialStore
from ..result import Err, Ok
from .installation_orchestrator import InstallationOrchestrator, RepositoryRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Result of syncing all installations."""

    repositories: dict[int, list[RepositoryRecord]] = field(default_factory=dict)
    failures: dict[int, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """Check if every installation was synced."""
        return not self.failures

    @property
    def repository_count(self) -> int:
        return sum(len(repos) for repos in self.repositories.values())


class SyncInstallations:
    """
    Use case for listing repositories of every registered installation.

    An installation whose token or listing fails is recorded and does not
    stop the others. A stored expiry that cannot be parsed raises
    TimestampParseError and aborts the whole sync.
    """

    def __init__(
        self,
        orchestrator: InstallationOrchestrator,
        store: CredentialStore,
        installation_ids: list[int] | None = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            orchestrator: Lists repositories of one installation.
            store: Credential store holding the registered installations.
            installation_ids: Installations to register before syncing.
        """
        self._orchestrator = orchestrator
        self._store = store
        self._installation_ids = installation_ids or []

    async def execute(self) -> SyncResult:
        """Register the configured installations and sync all stored ones."""
        for installation_id in self._installation_ids:
            await self._store.register(installation_id)

        installations = await self._store.list_installations()
        logger.info("Syncing %d installation(s)...", len(installations))

        result = SyncResult()
        for installation in installations:
            installation_id = installation.installation_id
            match await self._orchestrator.list_repositories(installation):
                case Ok(repositories):
                    result.repositories[installation_id] = repositories
                    logger.info(
                        "Installation %d: %d repositories", installation_id, len(repositories)
                    )
                case Err(error):
                    result.failures[installation_id] = f"{error.kind}: {error}"
                    logger.warning("Installation %d failed: %s", installation_id, error)

        logger.info(
            "Sync complete: %d repositories, %d failure(s)",
            result.repository_count,
            len(result.failures),
        )
        return result
