"""Port for credential persistence - driven/secondary port."""

from typing import Protocol

from ...domain.entities import InstallationCredential


class CredentialStore(Protocol):
    """
    Port for reading and updating installation credentials.

    This is a driven (secondary) port that defines how the application
    persists the access token of each installation.
    """

    async def get(self, installation_id: int) -> InstallationCredential:
        """
        Read the current credential of an installation.

        Raises:
            InstallationNotFoundError: If the installation is not registered.
            TimestampParseError: If the stored expiry is not valid ISO-8601.
        """
        ...

    async def update_token(
        self,
        installation: InstallationCredential,
        access_token: str,
        expires_at: str,
    ) -> InstallationCredential:
        """
        Atomically replace the token and its expiry for an installation.

        Args:
            installation: The installation whose record is updated.
            access_token: The newly minted token.
            expires_at: The token expiry as returned by GitHub.

        Returns:
            The updated credential, with the expiry parsed.

        Raises:
            PersistenceError: If the record is missing or the values are rejected.
                Nothing is written in that case.
        """
        ...

    async def register(self, installation_id: int) -> InstallationCredential:
        """Create an empty credential for an installation unless one exists."""
        ...

    async def list_installations(self) -> list[InstallationCredential]:
        """Return every stored credential ordered by installation id."""
        ...
