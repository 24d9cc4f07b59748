"""Application use cases."""

from .installation_orchestrator import InstallationOrchestrator, RepositoryRecord
from .sync_installations import SyncInstallations, SyncResult

__all__ = [
    "InstallationOrchestrator",
    "RepositoryRecord",
    "SyncInstallations",
    "SyncResult",
]
