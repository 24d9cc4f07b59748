"""Use case for listing every repository an installation can access."""

import logging
from typing import Any

from ...domain.entities import InstallationCredential
from ..exceptions import PersistenceError
from ..ports import CredentialStore
from ..result import Err, Ok, Result
from ..services import PaginationSweeper, TokenLifecycle

logger = logging.getLogger(__name__)

REPOSITORIES_ENDPOINT = "installation/repositories"
REPOSITORIES_FIELD = "repositories"

RepositoryRecord = dict[str, Any]


class InstallationOrchestrator:
    """
    Composes the token lifecycle and the pagination sweeper.

    Failures of either step are returned as they are; retries belong to
    the transport.
    """

    def __init__(
        self,
        token_lifecycle: TokenLifecycle,
        sweeper: PaginationSweeper,
        store: CredentialStore,
    ) -> None:
        self._tokens = token_lifecycle
        self._sweeper = sweeper
        self._store = store

    async def list_repositories(
        self, installation: InstallationCredential
    ) -> Result[list[RepositoryRecord]]:
        """
        List all repositories accessible to the installation.

        All pages of records are retrieved.
        """
        logger.info("Listing repositories for installation %d", installation.installation_id)
        match await self._tokens.acquire(installation):
            case Err() as failure:
                return failure
            case Ok(token):
                return await self._sweeper.sweep(REPOSITORIES_ENDPOINT, token, REPOSITORIES_FIELD)

    async def list_repositories_by_id(self, installation_id: int) -> Result[list[RepositoryRecord]]:
        """Load the stored credential of an installation and list its repositories."""
        try:
            installation = await self._store.get(installation_id)
        except PersistenceError as e:
            return Err(e)
        return await self.list_repositories(installation)

    async def refresh_by_id(self, installation_id: int) -> Result[InstallationCredential]:
        """
        Force a token refresh for an installation.

        Returns:
            Ok with the credential as persisted after the refresh.
        """
        try:
            installation = await self._store.get(installation_id)
        except PersistenceError as e:
            return Err(e)

        match await self._tokens.refresh(installation):
            case Err() as failure:
                return failure
            case Ok():
                try:
                    return Ok(await self._store.get(installation_id))
                except PersistenceError as e:
                    return Err(e)
