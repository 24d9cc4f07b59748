"""Shared credential store logic over a swappable record map."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod

from ....application.exceptions import InstallationNotFoundError
from ....domain.entities import InstallationCredential
from .records import InstallationRecord, TokenUpdate

logger = logging.getLogger(__name__)


class RecordCredentialStore(ABC):
    """
    Implements the CredentialStore port over a map of installation records.

    Writes happen under one lock and replace the whole map, so a reader
    never observes a token without its expiry. Subclasses decide where the
    map lives by implementing ``_load`` and ``_commit``.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    async def get(self, installation_id: int) -> InstallationCredential:
        records = await self._load()
        record = records.get(installation_id)
        if record is None:
            raise InstallationNotFoundError(installation_id)
        return record.to_credential()

    async def update_token(
        self,
        installation: InstallationCredential,
        access_token: str,
        expires_at: str,
    ) -> InstallationCredential:
        update = TokenUpdate.validate_fields(access_token, expires_at)
        installation_id = installation.installation_id

        async with self._lock:
            records = await self._load()
            current = records.get(installation_id)
            if current is None:
                raise InstallationNotFoundError(installation_id)

            updated = current.model_copy(update=update.model_dump())
            await self._commit({**records, installation_id: updated})

        logger.debug("Stored new token for installation %d", installation_id)
        return updated.to_credential()

    async def register(self, installation_id: int) -> InstallationCredential:
        async with self._lock:
            records = await self._load()
            record = records.get(installation_id)
            if record is None:
                record = InstallationRecord(installation_id=installation_id)
                await self._commit({**records, installation_id: record})
                logger.info("Registered installation %d", installation_id)
        return record.to_credential()

    async def list_installations(self) -> list[InstallationCredential]:
        records = await self._load()
        return [records[key].to_credential() for key in sorted(records)]

    @abstractmethod
    async def _load(self) -> dict[int, InstallationRecord]:
        """Return the current record map."""

    @abstractmethod
    async def _commit(self, records: dict[int, InstallationRecord]) -> None:
        """Replace the record map with ``records``."""
