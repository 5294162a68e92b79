"""Persistence layer: ORM models and the async engine."""
