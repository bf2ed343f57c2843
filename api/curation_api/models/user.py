"""User account record used to resolve authenticated principals."""

from __future__ import annotations

import typing
from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from curation_api.db.base_class import Base

if typing.TYPE_CHECKING:  # pragma: no cover
    from curation_api.models.playlist import Playlist


class User(Base):
    """Account that owns playlists; credentials live with the token issuer."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    playlists: Mapped[list["Playlist"]] = relationship(back_populates="owner")
