"""Installation access token lifecycle: expiry checks, refresh and persistence."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime

from ...domain.entities import InstallationCredential
from ..exceptions import PersistenceError, TransportError
from ..ports import CredentialStore, GitHubTransport
from ..result import Err, Ok, Result

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock."""
    return datetime.now(UTC)


class TokenLifecycle:
    """
    Hands out installation access tokens, refreshing them when expired.

    A cached token is returned as long as its expiry lies strictly in the
    future. Otherwise a new token is minted with the App JWT and persisted
    before it is handed out. Refreshes are serialized per installation so
    concurrent callers share one mint instead of racing.
    """

    def __init__(
        self,
        transport: GitHubTransport,
        store: CredentialStore,
        *,
        clock: Clock = utc_now,
    ) -> None:
        """
        Initialize the lifecycle.

        Args:
            transport: Adapter used to mint installation tokens.
            store: Adapter persisting the minted tokens.
            clock: Returns the current aware datetime.
        """
        self._transport = transport
        self._store = store
        self._clock = clock
        self._locks: dict[int, asyncio.Lock] = {}

    def is_expired(self, expires_at: datetime | None) -> bool:
        """Check if a token expiring at ``expires_at`` is unusable now."""
        if expires_at is None:
            return True
        return expires_at <= self._clock()

    async def acquire(self, installation: InstallationCredential) -> Result[str]:
        """
        Get a usable access token for the installation.

        Returns:
            Ok with the cached token if it has not expired, otherwise the
            result of a refresh.
        """
        if installation.access_token and not self.is_expired(installation.expires_at):
            logger.debug("Using cached token for installation %d", installation.installation_id)
            return Ok(installation.access_token)

        async with self._lock_for(installation.installation_id):
            # Another caller may have refreshed while this one waited.
            try:
                current = await self._store.get(installation.installation_id)
            except PersistenceError as e:
                return Err(e)
            if current.access_token and not self.is_expired(current.expires_at):
                logger.info(
                    "Installation %d was refreshed concurrently, reusing its token",
                    installation.installation_id,
                )
                return Ok(current.access_token)
            return await self._mint_and_persist(current)

    async def refresh(self, installation: InstallationCredential) -> Result[str]:
        """
        Mint a new access token for the installation and persist it.

        Returns:
            Ok with the new token, or Err with the TransportError of the mint
            call or the PersistenceError of the update. A token that was
            minted but could not be persisted is not returned.
        """
        async with self._lock_for(installation.installation_id):
            return await self._mint_and_persist(installation)

    def _lock_for(self, installation_id: int) -> asyncio.Lock:
        return self._locks.setdefault(installation_id, asyncio.Lock())

    async def _mint_and_persist(self, installation: InstallationCredential) -> Result[str]:
        installation_id = installation.installation_id
        logger.info("Refreshing access token for installation %d", installation_id)

        try:
            body = await self._transport.create_installation_token(installation_id)
        except TransportError as e:
            logger.warning("Token mint failed for installation %d: %s", installation_id, e)
            return Err(e)

        token = body.get("token")
        expires_at = body.get("expires_at")
        if not isinstance(token, str) or not isinstance(expires_at, str):
            logger.warning("Token response for installation %d is malformed", installation_id)
            return Err(TransportError("Token response missing token or expires_at"))

        try:
            await self._store.update_token(installation, token, expires_at)
        except PersistenceError as e:
            logger.error(
                "Minted token for installation %d could not be persisted: %s",
                installation_id,
                e,
            )
            return Err(e)

        logger.info("Installation %d token refreshed, expires at %s", installation_id, expires_at)
        return Ok(token)
