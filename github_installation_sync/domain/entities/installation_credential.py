"""Installation credential entity representing one installation's auth state."""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects import TokenState


@dataclass(frozen=True, slots=True)
class InstallationCredential:
    """The cached access token of a GitHub App installation."""

    installation_id: int
    access_token: str | None = None
    expires_at: datetime | None = None

    @property
    def is_issued(self) -> bool:
        """Check if a token was issued at least once."""
        return self.access_token is not None

    def is_expired(self, now: datetime) -> bool:
        """Check if the token is absent or expires at or before ``now``."""
        if self.expires_at is None:
            return True
        return self.expires_at <= now

    def state(self, now: datetime) -> TokenState:
        """Determine the token state at ``now``."""
        if not self.is_issued:
            return TokenState.UNISSUED
        if self.is_expired(now):
            return TokenState.EXPIRED
        return TokenState.VALID
