"""Shared helpers for API tests."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from curation_api.core.security import create_access_token
from curation_api.models.playlist import Playlist
from curation_api.models.user import User
from curation_api.services import tag_service, user_service


@dataclass(slots=True)
class AuthContext:
    """Authenticated user context for API tests."""

    user: User
    token: str

    @property
    def user_id(self) -> int:
        return self.user.id

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


async def create_authenticated_user(session: AsyncSession, *, prefix: str = "user") -> AuthContext:
    """Create a user and issue an access token for it."""
    suffix = uuid.uuid4().hex[:8]
    user = await user_service.create_user(
        session, email=f"{prefix}_{suffix}@example.com", display_name=f"{prefix.title()} {suffix}"
    )
    return AuthContext(user=user, token=create_access_token(str(user.id)))


async def make_playlist(
    session: AsyncSession, title: str, tags: list[str], *, owner_id: int | None = None
) -> Playlist:
    """Persist a playlist with the named tags."""
    playlist = Playlist(title=title, owner_id=owner_id)
    playlist.tags = await tag_service.resolve_tags(session, tags)
    session.add(playlist)
    await session.commit()
    return playlist
