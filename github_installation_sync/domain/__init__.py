"""Domain layer - Installation credentials and collection pages."""
