"""GitHub adapter - App authentication and REST transport."""

from .app_auth import GitHubAppAuth, GitHubAppConfig, load_private_key
from .client import GitHubClient

__all__ = [
    "GitHubAppAuth",
    "GitHubAppConfig",
    "GitHubClient",
    "load_private_key",
]
