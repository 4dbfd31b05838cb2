"""Persistence layer: database manager, table models, and repositories."""
