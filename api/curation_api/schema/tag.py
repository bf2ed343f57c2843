"""Tagging-related request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from curation_api.schema.base import ORMModel


class TagPayload(BaseModel):
    """Tag reference submitted by name."""
    name: str = Field(max_length=64)


class TagRead(ORMModel):
    """Tag representation returned by the API."""
    id: int
    name: str


def sort_tags(value: Any) -> Any:
    """Order tag collections by name so responses are stable."""
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=lambda tag: getattr(tag, "name", ""))
    return value
