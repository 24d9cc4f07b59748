"""Application ports - Interfaces for external adapters."""

from .credential_store import CredentialStore
from .github_transport import GitHubTransport

__all__ = [
    "CredentialStore",
    "GitHubTransport",
]
