"""Playlist model and its tag association."""

from __future__ import annotations

import typing
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from curation_api.db.base_class import Base
from curation_api.models.tagging import Tag, playlist_tags

if typing.TYPE_CHECKING:  # pragma: no cover
    from curation_api.models.user import User


class Playlist(Base):
    """Primary content entity; tags are shared, never owned."""
    __tablename__ = "playlists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    is_public: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    owner_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    owner: Mapped["User | None"] = relationship(back_populates="playlists")
    tags: Mapped[set[Tag]] = relationship(secondary=playlist_tags, collection_class=set)
