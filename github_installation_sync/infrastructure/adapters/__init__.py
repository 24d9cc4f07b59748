"""Infrastructure adapters - Implementations of application ports."""

from .github import GitHubAppAuth, GitHubClient
from .persistence import InMemoryCredentialStore, JsonFileCredentialStore

__all__ = [
    "GitHubAppAuth",
    "GitHubClient",
    "InMemoryCredentialStore",
    "JsonFileCredentialStore",
]
