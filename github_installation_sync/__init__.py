"""GitHub App installation credentials and repository sync."""

__version__ = "1.0.0"
