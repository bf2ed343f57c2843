"""Curation CRUD services with link ordering and shared tags."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from curation_api.models.curation import Curation, CurationLink
from curation_api.models.tagging import Tag, curation_tags
from curation_api.schema.curation import CurationCreate, CurationUpdate
from curation_api.services import tag_service


class CurationNotFoundError(ValueError):
    """Raised when a curation id does not exist."""


def _clean_fields(payload: CurationCreate) -> tuple[str, str, list[str], list[str]]:
    title = payload.title.strip()
    content = payload.content.strip()
    if not title:
        raise ValueError("Curation title cannot be blank")
    if not content:
        raise ValueError("Curation content cannot be blank")
    urls = [link.url.strip() for link in payload.links if link.url.strip()]
    tag_names = [tag.name for tag in payload.tags]
    return title, content, urls, tag_names


def _build_links(urls: list[str]) -> list[CurationLink]:
    return [CurationLink(url=url, position=index) for index, url in enumerate(urls, start=1)]


def _with_children(stmt):
    return stmt.execution_options(populate_existing=True).options(
        selectinload(Curation.links), selectinload(Curation.tags)
    )


async def list_curations(session: AsyncSession, tag: str | None = None) -> list[Curation]:
    """List curations newest first, optionally filtered by a tag name."""
    stmt = _with_children(select(Curation))
    if tag and tag.strip():
        stmt = (
            stmt.join(curation_tags, curation_tags.c.curation_id == Curation.id)
            .join(Tag, Tag.id == curation_tags.c.tag_id)
            .where(Tag.name == tag.strip())
        )
    result = await session.execute(stmt.order_by(Curation.id.desc()))
    return list(result.scalars().all())


async def get_curation(session: AsyncSession, curation_id: int) -> Curation:
    """Fetch a curation with links and tags or raise CurationNotFoundError."""
    result = await session.execute(_with_children(select(Curation)).where(Curation.id == curation_id))
    curation = result.scalar_one_or_none()
    if not curation:
        raise CurationNotFoundError("Curation not found")
    return curation


async def create_curation(session: AsyncSession, payload: CurationCreate) -> Curation:
    """Create a curation with its links and tags."""
    title, content, urls, tag_names = _clean_fields(payload)
    curation = Curation(title=title, content=content, links=_build_links(urls))
    curation.tags = await tag_service.resolve_tags(session, tag_names)
    session.add(curation)
    await session.commit()
    return await get_curation(session, curation.id)


async def update_curation(session: AsyncSession, curation_id: int, payload: CurationUpdate) -> Curation:
    """Replace a curation's fields, links, and tags."""
    title, content, urls, tag_names = _clean_fields(payload)
    curation = await get_curation(session, curation_id)
    curation.title = title
    curation.content = content
    curation.links = _build_links(urls)
    curation.tags = await tag_service.resolve_tags(session, tag_names)
    await session.commit()
    return await get_curation(session, curation_id)


async def delete_curation(session: AsyncSession, curation_id: int) -> None:
    """Delete a curation and its links."""
    curation = await get_curation(session, curation_id)
    await session.delete(curation)
    await session.commit()
