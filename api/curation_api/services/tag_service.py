"""Tag lookup and get-or-create helpers shared by playlists and curations."""

from __future__ import annotations

from typing import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from curation_api.models.tagging import Tag


def normalize_tag_names(names: Iterable[str]) -> list[str]:
    """Strip names, drop blanks, and de-duplicate while keeping first-seen order."""
    seen: set[str] = set()
    cleaned: list[str] = []
    for name in names:
        stripped = (name or "").strip()
        if not stripped or stripped in seen:
            continue
        seen.add(stripped)
        cleaned.append(stripped)
    return cleaned


async def resolve_tags(session: AsyncSession, names: Iterable[str]) -> set[Tag]:
    """Return Tag rows for the given names, creating any that do not exist yet.

    New tags are added to the session but not committed.
    """
    cleaned = normalize_tag_names(names)
    if not cleaned:
        return set()
    result = await session.execute(select(Tag).where(Tag.name.in_(cleaned)))
    existing = {tag.name: tag for tag in result.scalars().all()}
    tags: set[Tag] = set()
    for name in cleaned:
        tag = existing.get(name)
        if tag is None:
            tag = Tag(name=name)
            session.add(tag)
            existing[name] = tag
        tags.add(tag)
    return tags
