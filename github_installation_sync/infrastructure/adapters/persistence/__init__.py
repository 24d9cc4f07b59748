"""Persistence adapters - Credential store implementations."""

from .base import RecordCredentialStore
from .json_file import JsonFileCredentialStore
from .memory import InMemoryCredentialStore
from .records import InstallationRecord, TokenUpdate

__all__ = [
    "InMemoryCredentialStore",
    "InstallationRecord",
    "JsonFileCredentialStore",
    "RecordCredentialStore",
    "TokenUpdate",
]
