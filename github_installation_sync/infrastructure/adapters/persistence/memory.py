"""In-memory credential store."""

from __future__ import annotations

from .base import RecordCredentialStore
from .records import InstallationRecord


class InMemoryCredentialStore(RecordCredentialStore):
    """Credential store keeping records in a dict."""

    def __init__(self, records: list[InstallationRecord] | None = None) -> None:
        super().__init__()
        self._records: dict[int, InstallationRecord] = {
            record.installation_id: record for record in records or []
        }

    async def _load(self) -> dict[int, InstallationRecord]:
        return self._records

    async def _commit(self, records: dict[int, InstallationRecord]) -> None:
        self._records = records
