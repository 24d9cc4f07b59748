"""Tests for the pagination sweeper."""

from __future__ import annotations

import pytest

from github_installation_sync.application.exceptions import TransportError
from github_installation_sync.application.result import Err, Ok
from github_installation_sync.application.services import PaginationSweeper
from github_installation_sync.domain.entities import CollectionPage
from tests.conftest import FakeTransport, make_pages


class TestPaginationSweeper:
    """Tests for PaginationSweeper."""

    @pytest.mark.asyncio
    async def test_merges_all_pages_in_order(self) -> None:
        """Pages of 100, 100 and 7 items merge into 207 items in page order."""
        transport = FakeTransport(pages=make_pages(100, 100, 7))
        sweeper = PaginationSweeper(transport)

        result = await sweeper.sweep("installation/repositories", "ghs_token", "repositories")

        assert isinstance(result, Ok)
        assert len(result.value) == 207
        assert [repo["id"] for repo in result.value] == list(range(1, 208))
        assert [call["page"] for call in transport.page_calls] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_requests_use_token_and_page_size(self) -> None:
        """Every page is requested with the installation token and a page size of 100."""
        transport = FakeTransport(pages=make_pages(100, 1))
        sweeper = PaginationSweeper(transport)

        await sweeper.sweep("installation/repositories", "ghs_token", "repositories")

        assert transport.page_calls == [
            {"endpoint": "installation/repositories", "access_token": "ghs_token", "page": 1, "per_page": 100},
            {"endpoint": "installation/repositories", "access_token": "ghs_token", "page": 2, "per_page": 100},
        ]

    @pytest.mark.asyncio
    async def test_single_empty_page(self) -> None:
        """An installation without repositories yields an empty collection."""
        transport = FakeTransport(pages=make_pages(0))

        result = await PaginationSweeper(transport).sweep("installation/repositories", "t", "repositories")

        assert result == Ok([])
        assert len(transport.page_calls) == 1

    @pytest.mark.asyncio
    async def test_failure_discards_partial_results(self) -> None:
        """A failing second page aborts the sweep without the first page's items."""
        error = TransportError("GitHub API GET failed", status_code=502)
        pages = make_pages(100, 100, 7)
        transport = FakeTransport(pages=[pages[0], error, pages[2]])

        result = await PaginationSweeper(transport).sweep("installation/repositories", "t", "repositories")

        assert result == Err(error)
        assert len(transport.page_calls) == 2

    @pytest.mark.asyncio
    async def test_field_name_is_a_parameter(self) -> None:
        """The merged field is chosen by the caller."""
        transport = FakeTransport(pages=make_pages(2, 3, field_name="workflow_runs"))

        result = await PaginationSweeper(transport).sweep("repos/acme/app/actions/runs", "t", "workflow_runs")

        assert isinstance(result, Ok)
        assert len(result.value) == 5

    @pytest.mark.asyncio
    async def test_missing_field_is_transport_error(self) -> None:
        """A page without the requested array is a malformed response."""
        transport = FakeTransport(pages=[CollectionPage(number=1, body={"total_count": 0})])

        result = await PaginationSweeper(transport).sweep("installation/repositories", "t", "repositories")

        assert isinstance(result, Err)
        assert isinstance(result.error, TransportError)

    @pytest.mark.asyncio
    async def test_custom_page_size(self) -> None:
        """A smaller page size is passed through to the transport."""
        transport = FakeTransport(pages=make_pages(10))

        await PaginationSweeper(transport, page_size=10).sweep("installation/repositories", "t", "repositories")

        assert transport.page_calls[0]["per_page"] == 10

    @pytest.mark.parametrize("page_size", [0, -1, 101])
    def test_invalid_page_size(self, page_size: int) -> None:
        """Page size must be between 1 and 100."""
        with pytest.raises(ValueError, match="Page size must be"):
            PaginationSweeper(FakeTransport(), page_size=page_size)
