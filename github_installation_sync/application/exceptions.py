"""Application layer exceptions."""

from typing import Any, ClassVar


class ApplicationError(Exception):
    """Base exception for application errors."""

    kind: ClassVar[str] = "application_error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class TransportError(ApplicationError):
    """Raised when a GitHub API call fails or returns a malformed body."""

    kind = "transport_error"

    def __init__(
        self,
        detail: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.url = url

    def __str__(self) -> str:
        if self.status_code is None:
            return self.detail
        return f"{self.detail} (status {self.status_code})"


class PersistenceError(ApplicationError):
    """Raised when the credential store rejects a read or an update."""

    kind = "persistence_error"

    def __init__(self, detail: str, *, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(detail)
        self.errors = errors or []


class InstallationNotFoundError(PersistenceError):
    """Raised when no credential record exists for an installation."""

    kind = "not_found"

    def __init__(self, installation_id: int) -> None:
        super().__init__(f"Installation {installation_id} is not registered")
        self.installation_id = installation_id


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""

    kind = "configuration_error"
