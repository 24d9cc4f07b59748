"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse

from ....application.exceptions import ApplicationError, InstallationNotFoundError, PersistenceError
from ....application.result import Err, Ok
from ....application.services import utc_now
from .models import (
    ErrorResponse,
    HealthResponse,
    InstallationListResponse,
    InstallationResponse,
    RepositoryListResponse,
    TokenRefreshResponse,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from ....application.ports import CredentialStore
    from ....application.services import Clock
    from ....application.use_cases import InstallationOrchestrator

logger = logging.getLogger(__name__)


def error_response(error: ApplicationError) -> JSONResponse:
    """
    Map an application error to an HTTP response.

    Rejected credential updates become 422 with their validation errors.
    Everything else, unknown installations included, is an opaque 404.
    """
    if isinstance(error, PersistenceError) and not isinstance(error, InstallationNotFoundError):
        body = ErrorResponse(error=error.kind, detail=error.detail, errors=error.errors)
        return JSONResponse(
            status_code=422,
            content=body.model_dump(),
        )
    logger.info("API: request failed with %s: %s", error.kind, error)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ErrorResponse(error="not_found").model_dump(),
    )


def create_app(
    orchestrator: InstallationOrchestrator,
    store: CredentialStore,
    *,
    clock: Clock = utc_now,
    version: str = "1.0.0",
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        orchestrator: Lists repositories and refreshes tokens per installation.
        store: Credential store for listing installations.
        clock: Returns the current aware datetime.
        version: Application version string.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")

    app = FastAPI(
        title="GitHub Installation Sync API",
        description="List repositories of GitHub App installations and manage their access tokens. "
        "**Access tokens are never exposed through this API.**",
        version=version,
        lifespan=lifespan,
        responses={
            404: {"model": ErrorResponse, "description": "Installation or resource not found"},
            422: {"model": ErrorResponse, "description": "Credential update rejected"},
        },
    )

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(status="healthy", version=version, timestamp=clock())

    @app.get(
        "/api/v1/installations",
        response_model=InstallationListResponse,
        tags=["Installations"],
        summary="List installations",
    )
    async def list_installations() -> InstallationListResponse:
        now = clock()
        installations = await store.list_installations()
        return InstallationListResponse(
            installations=[
                InstallationResponse(
                    installation_id=installation.installation_id,
                    token_state=installation.state(now).value,
                    expires_at=installation.expires_at,
                )
                for installation in installations
            ]
        )

    @app.get(
        "/api/v1/installations/{installation_id}/repositories",
        response_model=RepositoryListResponse,
        tags=["Installations"],
        summary="List repositories of an installation",
        description="Retrieve every page of repositories accessible to the installation, "
        "refreshing its access token first if it has expired.",
    )
    async def list_repositories(installation_id: int) -> RepositoryListResponse | JSONResponse:
        match await orchestrator.list_repositories_by_id(installation_id):
            case Ok(repositories):
                return RepositoryListResponse(
                    installation_id=installation_id,
                    total_count=len(repositories),
                    repositories=repositories,
                )
            case Err(error):
                return error_response(error)

    @app.post(
        "/api/v1/installations/{installation_id}/token",
        response_model=TokenRefreshResponse,
        tags=["Installations"],
        summary="Refresh installation token",
    )
    async def refresh_token(installation_id: int) -> TokenRefreshResponse | JSONResponse:
        match await orchestrator.refresh_by_id(installation_id):
            case Ok(installation):
                return TokenRefreshResponse(
                    installation_id=installation.installation_id,
                    expires_at=installation.expires_at,
                )
            case Err(error):
                return error_response(error)

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    return app
