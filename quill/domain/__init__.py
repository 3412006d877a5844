"""Domain layer: entities, value objects, repositories and services."""
