"""Domain entities - Objects with identity and lifecycle."""

from .collection_page import CollectionPage
from .installation_credential import InstallationCredential

__all__ = [
    "CollectionPage",
    "InstallationCredential",
]
