"""Playlist request/response schemas."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from curation_api.schema.base import Timestamped
from curation_api.schema.tag import TagRead, sort_tags


class PlaylistCreate(BaseModel):
    """Payload for creating a playlist; tags are given by name."""
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    is_public: bool = True
    tags: list[Annotated[str, Field(max_length=64)]] = Field(default_factory=list)


class PlaylistUpdate(PlaylistCreate):
    """Full replacement payload for an existing playlist."""


class PlaylistRead(Timestamped):
    """Playlist representation returned by the API."""
    title: str
    description: str | None = None
    is_public: bool
    owner_id: int | None = None
    tags: list[TagRead] = Field(default_factory=list)

    order_tags = field_validator("tags", mode="before")(sort_tags)
