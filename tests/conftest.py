"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from github_installation_sync.application.exceptions import PersistenceError
from github_installation_sync.domain.entities import CollectionPage, InstallationCredential
from github_installation_sync.infrastructure.adapters.persistence import (
    InMemoryCredentialStore,
    InstallationRecord,
)

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)
INSTALLATION_ID = 4242


class FakeClock:
    """Clock frozen at a settable instant."""

    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


class FakeTransport:
    """GitHubTransport stub recording every call."""

    def __init__(
        self,
        *,
        token_body: dict[str, Any] | Exception | None = None,
        pages: list[CollectionPage | Exception] | None = None,
    ) -> None:
        self.token_body = token_body or {
            "token": "ghs_fresh",
            "expires_at": "2026-01-15T13:00:00Z",
        }
        self.pages = pages or []
        self.mint_calls: list[int] = []
        self.page_calls: list[dict[str, Any]] = []

    async def create_installation_token(self, installation_id: int) -> dict[str, Any]:
        self.mint_calls.append(installation_id)
        # Yield so concurrent callers interleave at the network boundary.
        await asyncio.sleep(0)
        if isinstance(self.token_body, Exception):
            raise self.token_body
        return dict(self.token_body)

    async def get_page(
        self,
        endpoint: str,
        access_token: str,
        *,
        page: int,
        per_page: int,
    ) -> CollectionPage:
        self.page_calls.append(
            {"endpoint": endpoint, "access_token": access_token, "page": page, "per_page": per_page}
        )
        result = self.pages[page - 1]
        if isinstance(result, Exception):
            raise result
        return result


class RecordingStore(InMemoryCredentialStore):
    """In-memory store counting token updates, optionally rejecting them."""

    def __init__(self, records: list[InstallationRecord] | None = None, *, reject: bool = False) -> None:
        super().__init__(records)
        self.reject = reject
        self.update_calls: list[tuple[int, str, str]] = []

    async def update_token(
        self,
        installation: InstallationCredential,
        access_token: str,
        expires_at: str,
    ) -> InstallationCredential:
        self.update_calls.append((installation.installation_id, access_token, expires_at))
        if self.reject:
            raise PersistenceError(
                "Access token update rejected",
                errors=[{"loc": ["access_token"], "msg": "rejected", "type": "value_error"}],
            )
        return await super().update_token(installation, access_token, expires_at)


def make_pages(*sizes: int, field_name: str = "repositories") -> list[CollectionPage]:
    """Build consecutive listing pages holding ``sizes`` items each."""
    pages: list[CollectionPage] = []
    next_id = 1
    for number, size in enumerate(sizes, start=1):
        items = [{"id": next_id + offset, "full_name": f"acme/repo-{next_id + offset}"} for offset in range(size)]
        next_id += size
        pages.append(
            CollectionPage(
                number=number,
                body={field_name: items, "total_count": sum(sizes)},
                has_next=number < len(sizes),
            )
        )
    return pages


def record(expires_at: datetime | None, token: str | None = "ghs_cached") -> InstallationRecord:
    """Stored record for the default installation."""
    return InstallationRecord(
        installation_id=INSTALLATION_ID,
        access_token=token if expires_at is not None else None,
        access_token_expires_at=expires_at.isoformat() if expires_at is not None else None,
    )


@pytest.fixture
def clock() -> FakeClock:
    """Clock frozen at NOW."""
    return FakeClock()


@pytest.fixture
def valid_record() -> InstallationRecord:
    """A stored token expiring in one hour."""
    return record(NOW + timedelta(hours=1))


@pytest.fixture
def expired_record() -> InstallationRecord:
    """A stored token that expired one minute ago."""
    return record(NOW - timedelta(minutes=1))


@pytest.fixture
def unissued_record() -> InstallationRecord:
    """A registered installation that never received a token."""
    return record(None)
