"""Curation posts with their links and tags."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from curation_api.db.base_class import Base
from curation_api.models.tagging import Tag, curation_tags


class Curation(Base):
    """A curated post pointing at external links."""
    __tablename__ = "curations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    links: Mapped[list["CurationLink"]] = relationship(
        back_populates="curation",
        cascade="all, delete-orphan",
        order_by="CurationLink.position",
    )
    tags: Mapped[set[Tag]] = relationship(secondary=curation_tags, collection_class=set)


class CurationLink(Base):
    """One external URL attached to a curation, kept in submission order."""
    __tablename__ = "curation_links"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    curation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("curations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)

    curation: Mapped[Curation] = relationship(back_populates="links")
