"""API response models (access tokens are never exposed)."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class InstallationResponse(BaseModel):
    """Token state of one installation (no token value)."""

    installation_id: int
    token_state: str = Field(description="unissued, valid or expired")
    expires_at: datetime | None = None


class InstallationListResponse(BaseModel):
    """All registered installations."""

    installations: list[InstallationResponse]


class RepositoryListResponse(BaseModel):
    """Every repository accessible to an installation."""

    installation_id: int
    total_count: int = Field(description="Number of repositories across all pages")
    repositories: list[dict[str, Any]]


class TokenRefreshResponse(BaseModel):
    """Outcome of a forced token refresh (no token value)."""

    installation_id: int
    expires_at: datetime | None


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
    errors: list[dict[str, Any]] = Field(default_factory=list)
