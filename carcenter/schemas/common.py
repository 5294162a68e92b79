"""Shared schema base classes and field validators."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialises as camelCase and accepts either camelCase or snake_case input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def not_blank(value: str) -> str:
    """Reject empty and whitespace-only strings without altering the value."""
    if not value.strip():
        raise ValueError("must not be blank")
    return value
