"""API adapter for HTTP endpoints."""

from .app import create_app, error_response
from .models import (
    ErrorResponse,
    HealthResponse,
    InstallationListResponse,
    RepositoryListResponse,
    TokenRefreshResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "InstallationListResponse",
    "RepositoryListResponse",
    "TokenRefreshResponse",
    "create_app",
    "error_response",
]
