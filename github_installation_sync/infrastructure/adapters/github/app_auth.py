"""GitHub App JWT authentication."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

import jwt
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ....application.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Issued in the past to absorb clock drift; GitHub caps the lifetime at 10 minutes.
JWT_ISSUED_AT_OFFSET = 60
JWT_LIFETIME = 600


@dataclass(frozen=True, slots=True)
class GitHubAppConfig:
    """Configuration for GitHub App authentication and API access."""

    app_id: str
    private_key: str
    api_url: str = "https://api.github.com"
    timeout: float = 30.0


def load_private_key(raw: str) -> str:
    """
    Load the App private key from a PEM string or a path to a PEM file.

    Raises:
        ConfigurationError: If the value is neither.
    """
    if "BEGIN" in raw and "PRIVATE KEY" in raw:
        return raw.replace("\\n", "\n")
    path = Path(raw.strip().strip('"'))
    if path.is_file():
        logger.info("Loaded GitHub App private key from %s", path)
        return path.read_text()
    msg = "GITHUB_APP_PRIVATE_KEY must be a PEM string or path to a private key file"
    raise ConfigurationError(msg)


def parse_private_key(pem: str) -> rsa.RSAPrivateKey:
    """
    Parse an unencrypted PEM RSA private key.

    Raises:
        ConfigurationError: If the PEM cannot be parsed or is not an RSA key.
    """
    try:
        key = serialization.load_pem_private_key(pem.encode(), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        msg = f"GITHUB_APP_PRIVATE_KEY is not a valid PEM private key: {e}"
        raise ConfigurationError(msg) from e
    if not isinstance(key, rsa.RSAPrivateKey):
        msg = "GITHUB_APP_PRIVATE_KEY must be an RSA private key"
        raise ConfigurationError(msg)
    return key


class GitHubAppAuth:
    """Signs short-lived JWTs proving the App's own identity."""

    def __init__(self, app_id: str, private_key: str) -> None:
        if not app_id:
            msg = "GitHub App ID is required"
            raise ConfigurationError(msg)
        self._app_id = app_id
        self._private_key = parse_private_key(load_private_key(private_key))

    def generate_jwt(self, now: int | None = None) -> str:
        """Generate an RS256 JWT for authenticating as the App."""
        issued = int(time.time()) if now is None else now
        payload = {
            "iat": issued - JWT_ISSUED_AT_OFFSET,
            "exp": issued + JWT_LIFETIME,
            "iss": self._app_id,
        }
        return jwt.encode(payload, self._private_key, algorithm="RS256")
