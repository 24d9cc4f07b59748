"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class TimestampParseError(DomainError):
    """Raised when a timestamp is not extended ISO-8601 with a zone offset."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid ISO-8601 timestamp: {value!r}")
