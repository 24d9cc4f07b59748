"""Persisted installation records and token update validation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ....application.exceptions import PersistenceError
from ....domain.entities import InstallationCredential
from ....domain.exceptions import TimestampParseError
from ....domain.value_objects import parse_timestamp


class InstallationRecord(BaseModel):
    """Durable record of one installation's access token."""

    model_config = ConfigDict(frozen=True)

    installation_id: int
    access_token: str | None = None
    access_token_expires_at: str | None = None

    def to_credential(self) -> InstallationCredential:
        """
        Convert to the domain entity, parsing the expiry once.

        Raises:
            TimestampParseError: If the stored expiry is not extended ISO-8601.
        """
        expires_at = self.access_token_expires_at
        return InstallationCredential(
            installation_id=self.installation_id,
            access_token=self.access_token,
            expires_at=parse_timestamp(expires_at) if expires_at is not None else None,
        )


class TokenUpdate(BaseModel):
    """Both token fields of an update; neither is written without the other."""

    access_token: str = Field(min_length=1)
    access_token_expires_at: str

    @field_validator("access_token_expires_at")
    @classmethod
    def _extended_iso_8601(cls, value: str) -> str:
        try:
            parse_timestamp(value)
        except TimestampParseError as e:
            raise ValueError(str(e)) from e
        return value

    @classmethod
    def validate_fields(cls, access_token: str, expires_at: str) -> TokenUpdate:
        """
        Validate a token update.

        Raises:
            PersistenceError: Carrying the validation errors, without input values.
        """
        try:
            return cls(access_token=access_token, access_token_expires_at=expires_at)
        except ValidationError as e:
            raise PersistenceError(
                "Access token update rejected",
                errors=e.errors(include_url=False, include_context=False, include_input=False),
            ) from e
