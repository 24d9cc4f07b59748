"""Credential store persisted to a JSON file."""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from pathlib import Path

from pydantic import BaseModel, ValidationError

from ....application.exceptions import PersistenceError
from .base import RecordCredentialStore
from .records import InstallationRecord

logger = logging.getLogger(__name__)


class StoreDocument(BaseModel):
    """On-disk layout of the credential file."""

    installations: list[InstallationRecord] = []


class JsonFileCredentialStore(RecordCredentialStore):
    """
    Credential store backed by a JSON file.

    The file is re-read on every access and replaced atomically on every
    write, so both token fields always land on disk together. File access
    runs in a worker thread to keep the event loop free.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def _load(self) -> dict[int, InstallationRecord]:
        document = await asyncio.to_thread(self._read_document)
        return {record.installation_id: record for record in document.installations}

    async def _commit(self, records: dict[int, InstallationRecord]) -> None:
        document = StoreDocument(installations=[records[key] for key in sorted(records)])
        await asyncio.to_thread(self._write_document, document)

    def _read_document(self) -> StoreDocument:
        if not self._path.exists():
            return StoreDocument()
        try:
            return StoreDocument.model_validate_json(self._path.read_text())
        except (OSError, ValidationError) as e:
            msg = f"Failed to read credential store {self._path}: {e}"
            logger.exception(msg)
            raise PersistenceError(msg) from e

    def _write_document(self, document: StoreDocument) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(document.model_dump_json(indent=2))
            os.replace(tmp_name, self._path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            msg = f"Failed to write credential store {self._path}: {e}"
            logger.exception(msg)
            raise PersistenceError(msg) from e
