"""Collection page entity for one response of a paginated listing."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class CollectionPage:
    """A single page returned by a paginated listing endpoint."""

    number: int
    body: dict[str, Any] = field(default_factory=dict)
    has_next: bool = False

    def items(self, field_name: str) -> list[Any] | None:
        """
        Extract the named array field from the page body.

        Returns:
            The array, or None if the field is missing or not a list.
        """
        value = self.body.get(field_name)
        return value if isinstance(value, list) else None
