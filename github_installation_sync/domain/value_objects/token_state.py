"""Token state value object."""

from enum import StrEnum, auto


class TokenState(StrEnum):
    """State of an installation access token at a point in time."""

    UNISSUED = auto()
    VALID = auto()
    EXPIRED = auto()

    def __str__(self) -> str:
        return self.value
