"""Domain value objects - Immutable objects defined by their attributes."""

from .timestamp import parse_timestamp
from .token_state import TokenState

__all__ = [
    "TokenState",
    "parse_timestamp",
]
