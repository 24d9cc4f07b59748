"""Port for the GitHub API transport - driven/secondary port."""

from typing import Any, Protocol

from ...domain.entities import CollectionPage


class GitHubTransport(Protocol):
    """
    Port for authenticated calls to the GitHub API.

    Token minting is authenticated as the App itself, page reads are
    authenticated as the installation.
    """

    async def create_installation_token(self, installation_id: int) -> dict[str, Any]:
        """
        Mint a new installation access token using the App JWT.

        Returns:
            The response body, containing ``token`` and ``expires_at`` strings.

        Raises:
            TransportError: On network failure, non-2xx status or a malformed body.
        """
        ...

    async def get_page(
        self,
        endpoint: str,
        access_token: str,
        *,
        page: int,
        per_page: int,
    ) -> CollectionPage:
        """
        Fetch one page of a paginated listing endpoint.

        Raises:
            TransportError: On network failure, non-2xx status or a malformed body.
        """
        ...
