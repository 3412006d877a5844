"""Persistence layer: tables, mappers and repository implementations."""
