"""Application services - Token lifecycle and pagination."""

from .pagination_sweeper import PaginationSweeper
from .token_lifecycle import Clock, TokenLifecycle, utc_now

__all__ = [
    "Clock",
    "PaginationSweeper",
    "TokenLifecycle",
    "utc_now",
]
