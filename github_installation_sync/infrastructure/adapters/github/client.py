"""GitHub REST API client for App installations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

import httpx

from ....application.exceptions import TransportError
from ....domain.entities import CollectionPage

if TYPE_CHECKING:
    from .app_auth import GitHubAppAuth, GitHubAppConfig

logger = logging.getLogger(__name__)


class GitHubClient:
    """
    Async client for the GitHub REST API.

    Mints installation tokens as the App and reads listing pages as an
    installation. Every failure surfaces as a TransportError.
    """

    API_VERSION: ClassVar[str] = "2022-11-28"
    ACCEPT: ClassVar[str] = "application/vnd.github+json"

    def __init__(
        self,
        config: GitHubAppConfig,
        auth: GitHubAppAuth,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            config: API base URL and timeout.
            auth: Signer for App JWTs.
            transport: Optional httpx transport, used to stub the network in tests.
        """
        self._config = config
        self._auth = auth
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.api_url.rstrip("/") + "/",
            timeout=self._config.timeout,
            transport=self._transport,
        )

    def _headers(self, bearer: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {bearer}",
            "Accept": self.ACCEPT,
            "X-GitHub-Api-Version": self.API_VERSION,
        }

    async def create_installation_token(self, installation_id: int) -> dict[str, Any]:
        """
        Mint an installation access token using the App JWT.

        Returns:
            Response body with ``token`` and ``expires_at``.
        """
        endpoint = f"app/installations/{installation_id}/access_tokens"
        app_jwt = self._auth.generate_jwt()

        async with self._client() as client:
            response = await self._send(client, "POST", endpoint, headers=self._headers(app_jwt))
        return self._json_object(response)

    async def get_page(
        self,
        endpoint: str,
        access_token: str,
        *,
        page: int,
        per_page: int,
    ) -> CollectionPage:
        """Fetch one page of a listing endpoint authenticated as the installation."""
        params = {"per_page": per_page, "page": page}

        async with self._client() as client:
            response = await self._send(
                client,
                "GET",
                endpoint.lstrip("/"),
                headers=self._headers(access_token),
                params=params,
            )

        return CollectionPage(
            number=page,
            body=self._json_object(response),
            has_next="next" in response.links,
        )

    @staticmethod
    async def _send(
        client: httpx.AsyncClient,
        method: str,
        endpoint: str,
        **kwargs: Any,
    ) -> httpx.Response:
        logger.debug("%s %s", method, endpoint)
        try:
            response = await client.request(method, endpoint, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"GitHub API {method} {endpoint} failed",
                status_code=e.response.status_code,
                url=str(e.request.url),
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"GitHub API {method} {endpoint} failed: {e}") from e
        return response

    @staticmethod
    def _json_object(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                "GitHub API returned a non-JSON body",
                status_code=response.status_code,
                url=str(response.request.url),
            ) from e
        if not isinstance(data, dict):
            raise TransportError(
                "GitHub API returned a non-object body",
                status_code=response.status_code,
                url=str(response.request.url),
            )
        return data
