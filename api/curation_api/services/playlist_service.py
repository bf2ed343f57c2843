"""Playlist CRUD and tag-based recommendation queries.

Invariants:
- A playlist is never recommended for itself.
- Recommendations are de-duplicated; a playlist sharing several tags appears once.
- Recommendation results carry no ordering contract.
- Store failures surface as DataAccessError without retries.
"""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from curation_api.models.playlist import Playlist
from curation_api.models.tagging import Tag, playlist_tags
from curation_api.schema.playlist import PlaylistCreate, PlaylistUpdate
from curation_api.services import tag_service
from curation_api.utils.redaction import redact_secrets

logger = logging.getLogger("curation_api.services.playlist_service")


class DataAccessError(RuntimeError):
    """Raised when the data store cannot answer a playlist query."""


class PlaylistNotFoundError(ValueError):
    """Raised when a playlist id does not exist."""


class PlaylistPermissionError(ValueError):
    """Raised when a user modifies a playlist they do not own."""


def _tag_ids(tags: Iterable[Tag | int]) -> set[int]:
    ids: set[int] = set()
    for tag in tags:
        tag_id = tag if isinstance(tag, int) else tag.id
        if tag_id is not None:
            ids.add(tag_id)
    return ids


async def find_recommended(
    session: AsyncSession, tags: Iterable[Tag | int], exclude_playlist_id: int
) -> list[Playlist]:
    """Return playlists sharing at least one of ``tags``, excluding one playlist.

    ``tags`` may hold Tag rows or tag ids. An empty tag set yields an empty
    list without touching the store.
    """
    tag_ids = _tag_ids(tags)
    if not tag_ids:
        logger.debug("Skipping recommendation query for playlist %s: no tags", exclude_playlist_id)
        return []

    stmt = (
        select(Playlist)
        .join(playlist_tags, playlist_tags.c.playlist_id == Playlist.id)
        .where(playlist_tags.c.tag_id.in_(tag_ids), Playlist.id != exclude_playlist_id)
        .distinct()
        .options(selectinload(Playlist.tags))
    )
    try:
        result = await session.execute(stmt)
        playlists = list(result.scalars().all())
    except (SQLAlchemyError, OSError) as exc:
        logger.warning(
            "Recommendation query failed for playlist %s: %s", exclude_playlist_id, redact_secrets(str(exc))
        )
        raise DataAccessError("Playlist recommendation query failed") from exc

    logger.debug(
        "Found %d recommendations for playlist %s across %d tags",
        len(playlists),
        exclude_playlist_id,
        len(tag_ids),
    )
    return playlists


async def recommend_for_playlist(session: AsyncSession, playlist_id: int) -> list[Playlist]:
    """Recommend playlists for an existing playlist using its own tags."""
    try:
        playlist = await get_playlist(session, playlist_id)
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("Playlist lookup failed for %s: %s", playlist_id, redact_secrets(str(exc)))
        raise DataAccessError("Playlist lookup failed") from exc
    return await find_recommended(session, playlist.tags, playlist.id)


async def list_playlists(session: AsyncSession) -> list[Playlist]:
    """List all playlists with their tags."""
    result = await session.execute(
        select(Playlist).options(selectinload(Playlist.tags)).order_by(Playlist.id.asc())
    )
    return list(result.scalars().all())


async def get_playlist(session: AsyncSession, playlist_id: int) -> Playlist:
    """Fetch a playlist with tags or raise PlaylistNotFoundError."""
    result = await session.execute(
        select(Playlist)
        .execution_options(populate_existing=True)
        .options(selectinload(Playlist.tags))
        .where(Playlist.id == playlist_id)
    )
    playlist = result.scalar_one_or_none()
    if not playlist:
        raise PlaylistNotFoundError("Playlist not found")
    return playlist


async def create_playlist(session: AsyncSession, owner_id: int | None, payload: PlaylistCreate) -> Playlist:
    """Create a playlist owned by ``owner_id`` and attach its tags by name."""
    title = payload.title.strip()
    if not title:
        raise ValueError("Playlist title cannot be blank")
    playlist = Playlist(
        title=title,
        description=payload.description,
        is_public=payload.is_public,
        owner_id=owner_id,
    )
    playlist.tags = await tag_service.resolve_tags(session, payload.tags)
    session.add(playlist)
    await session.commit()
    return await get_playlist(session, playlist.id)


async def _get_owned_playlist(session: AsyncSession, playlist_id: int, owner_id: int) -> Playlist:
    playlist = await get_playlist(session, playlist_id)
    if playlist.owner_id != owner_id:
        raise PlaylistPermissionError("Not allowed to modify this playlist")
    return playlist


async def update_playlist(
    session: AsyncSession, playlist_id: int, owner_id: int, payload: PlaylistUpdate
) -> Playlist:
    """Replace a playlist's fields and tag set."""
    title = payload.title.strip()
    if not title:
        raise ValueError("Playlist title cannot be blank")
    playlist = await _get_owned_playlist(session, playlist_id, owner_id)
    playlist.title = title
    playlist.description = payload.description
    playlist.is_public = payload.is_public
    playlist.tags = await tag_service.resolve_tags(session, payload.tags)
    await session.commit()
    return await get_playlist(session, playlist_id)


async def delete_playlist(session: AsyncSession, playlist_id: int, owner_id: int) -> None:
    """Delete a playlist owned by ``owner_id``."""
    playlist = await _get_owned_playlist(session, playlist_id, owner_id)
    await session.delete(playlist)
    await session.commit()
