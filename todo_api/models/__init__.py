"""Domain entities and API contracts."""
