"""Seed script for demo data in local/dev environments."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from curation_api.core.security import create_access_token
from curation_api.db.session import async_session
from curation_api.models.curation import Curation
from curation_api.models.playlist import Playlist
from curation_api.schema.curation import CurationCreate, LinkPayload
from curation_api.schema.playlist import PlaylistCreate
from curation_api.schema.tag import TagPayload
from curation_api.services import curation_service, playlist_service, user_service

DEMO_EMAIL = "demo@curation.local"
DEMO_DISPLAY_NAME = "Demo Curator"


@dataclass(frozen=True)
class SeedPlaylistDefinition:
    """Structured definition for seed playlists and their tags."""
    title: str
    description: str
    tags: tuple[str, ...]


SEED_PLAYLISTS: tuple[SeedPlaylistDefinition, ...] = (
    SeedPlaylistDefinition(
        title="Late Night Drive",
        description="Synth-heavy tracks for empty highways.",
        tags=("rock", "pop"),
    ),
    SeedPlaylistDefinition(
        title="Sunday Brunch",
        description="Easy listening for slow mornings.",
        tags=("pop",),
    ),
    SeedPlaylistDefinition(
        title="Blue Notes",
        description="Standards and modal jazz.",
        tags=("jazz",),
    ),
)

SEED_CURATION = CurationCreate(
    title="Getting started with playlist tags",
    content="Tags connect playlists that share a mood or genre.",
    links=[LinkPayload(url="https://example.com/tags-guide")],
    tags=[TagPayload(name="pop"), TagPayload(name="guide")],
)


async def seed(session: AsyncSession | None = None) -> str:
    """Seed demo data and return an access token for the demo user."""
    if session is None:
        async with async_session() as managed_session:
            return await _seed_session(managed_session)
    return await _seed_session(session)


async def _seed_session(session: AsyncSession) -> str:
    """Populate a session with the demo user, playlists, and a curation."""
    user = await user_service.get_user_by_email(session, DEMO_EMAIL)
    if not user:
        user = await user_service.create_user(session, email=DEMO_EMAIL, display_name=DEMO_DISPLAY_NAME)

    await _ensure_playlists(session, user.id)
    await _ensure_curation(session)

    token = create_access_token(str(user.id))
    print(f"Seed complete - demo access token: {token}")
    return token


async def _ensure_playlists(session: AsyncSession, user_id: int) -> None:
    """Create demo playlists that have not been seeded yet."""
    result = await session.execute(select(Playlist.title).where(Playlist.owner_id == user_id))
    existing = set(result.scalars().all())
    for definition in SEED_PLAYLISTS:
        if definition.title in existing:
            continue
        await playlist_service.create_playlist(
            session,
            user_id,
            PlaylistCreate(title=definition.title, description=definition.description, tags=list(definition.tags)),
        )


async def _ensure_curation(session: AsyncSession) -> None:
    """Create the demo curation once."""
    result = await session.execute(select(Curation.id).where(Curation.title == SEED_CURATION.title))
    if result.scalar_one_or_none() is None:
        await curation_service.create_curation(session, SEED_CURATION)


def main() -> None:
    """CLI entrypoint for seeding demo data."""
    asyncio.run(seed())


if __name__ == "__main__":
    main()
