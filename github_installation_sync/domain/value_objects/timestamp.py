"""Timestamp parsing for token expiry values."""

import re
from datetime import UTC, datetime

from ..exceptions import TimestampParseError

# Extended format only: separators are required and a zone designator must be present.
_EXTENDED_ISO_8601 = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,6})?(?:Z|[+-]\d{2}:\d{2})$"
)


def parse_timestamp(value: str) -> datetime:
    """
    Parse an extended ISO-8601 timestamp with a zone offset.

    Args:
        value: Text such as ``2024-01-01T12:00:00Z`` or ``2024-01-01T12:00:00+02:00``.

    Returns:
        The equivalent timezone-aware datetime, normalized to UTC.

    Raises:
        TimestampParseError: If the text is not extended ISO-8601 with a zone.
    """
    if not isinstance(value, str) or not _EXTENDED_ISO_8601.match(value):
        raise TimestampParseError(value)
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise TimestampParseError(value) from e
    return parsed.astimezone(UTC)
