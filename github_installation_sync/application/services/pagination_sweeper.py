"""Full pagination sweeps over GitHub listing endpoints."""

import logging
from typing import Any

from ..exceptions import TransportError
from ..ports import GitHubTransport
from ..result import Err, Ok, Result

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class PaginationSweeper:
    """Walks every page of a listing endpoint and merges one array field."""

    def __init__(self, transport: GitHubTransport, *, page_size: int = MAX_PAGE_SIZE) -> None:
        if not 0 < page_size <= MAX_PAGE_SIZE:
            msg = f"Page size must be: 0 < page_size({page_size}) <= {MAX_PAGE_SIZE}"
            raise ValueError(msg)
        self._transport = transport
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    async def sweep(
        self,
        endpoint: str,
        access_token: str,
        field_name: str,
    ) -> Result[list[Any]]:
        """
        Retrieve all pages from a paginated endpoint.

        Args:
            endpoint: The API endpoint path, e.g. ``installation/repositories``.
            access_token: Installation token used to authenticate each page.
            field_name: The array field merged from each page body.

        Returns:
            Ok with the items of every page in arrival order, or Err with the
            first page failure. Items of earlier pages are discarded on error.
        """
        merged: list[Any] = []
        page_number = 1

        while True:
            try:
                page = await self._transport.get_page(
                    endpoint,
                    access_token,
                    page=page_number,
                    per_page=self._page_size,
                )
            except TransportError as e:
                logger.warning("Sweep of %s aborted on page %d: %s", endpoint, page_number, e)
                return Err(e)

            items = page.items(field_name)
            if items is None:
                logger.warning("Page %d of %s has no %r array", page_number, endpoint, field_name)
                return Err(TransportError(f"Page {page_number} of {endpoint} has no {field_name!r} array"))

            merged.extend(items)
            if not page.has_next:
                break
            page_number += 1

        logger.info("Swept %d %s from %d page(s) of %s", len(merged), field_name, page_number, endpoint)
        return Ok(merged)
