"""Tests for Ok/Err results."""

from __future__ import annotations

import pytest

from github_installation_sync.application.exceptions import PersistenceError, TransportError
from github_installation_sync.application.result import Err, Ok


class TestResult:
    """Tests for Ok and Err."""

    def test_ok_unwraps_value(self) -> None:
        """Ok carries its value."""
        result = Ok(["repo"])
        assert result.is_ok is True
        assert result.unwrap() == ["repo"]

    def test_err_unwrap_raises_carried_error(self) -> None:
        """Err raises the very error it carries."""
        error = TransportError("boom", status_code=503)
        result = Err(error)
        assert result.is_ok is False
        with pytest.raises(TransportError) as exc_info:
            result.unwrap()
        assert exc_info.value is error

    def test_errors_expose_kind_and_detail(self) -> None:
        """Errors keep enough structure for the HTTP boundary to map them."""
        error = PersistenceError("rejected", errors=[{"loc": ("access_token",), "msg": "too short"}])
        assert error.kind == "persistence_error"
        assert error.detail == "rejected"
        assert error.errors[0]["msg"] == "too short"
        assert TransportError("x").kind == "transport_error"
        assert str(TransportError("GitHub API GET failed", status_code=502)) == "GitHub API GET failed (status 502)"
