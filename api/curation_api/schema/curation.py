"""Curation request/response schemas.

Request bodies accept both the frontend field names (``linkReqDtos``,
``tagReqDtos``) and their snake_case equivalents.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field, field_validator

from curation_api.schema.base import ORMModel, Timestamped
from curation_api.schema.tag import TagPayload, TagRead, sort_tags


class LinkPayload(BaseModel):
    """Link submitted with a curation."""
    url: str = Field(max_length=2048)


class CurationCreate(BaseModel):
    """Payload for creating or replacing a curation."""
    title: str = Field(max_length=255)
    content: str
    links: list[LinkPayload] = Field(
        default_factory=list, validation_alias=AliasChoices("linkReqDtos", "links")
    )
    tags: list[TagPayload] = Field(
        default_factory=list, validation_alias=AliasChoices("tagReqDtos", "tags")
    )


class CurationUpdate(CurationCreate):
    """Full replacement payload for an existing curation."""


class LinkRead(ORMModel):
    url: str


class CurationRead(Timestamped):
    """Curation representation returned by the API."""
    title: str
    content: str
    urls: list[LinkRead] = Field(default_factory=list, validation_alias=AliasChoices("links", "urls"))
    tags: list[TagRead] = Field(default_factory=list)

    order_tags = field_validator("tags", mode="before")(sort_tags)
