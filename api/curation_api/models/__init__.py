from curation_api.models.curation import Curation, CurationLink
from curation_api.models.playlist import Playlist
from curation_api.models.tagging import Tag, curation_tags, playlist_tags
from curation_api.models.user import User

__all__ = [
    "Curation",
    "CurationLink",
    "Playlist",
    "Tag",
    "User",
    "curation_tags",
    "playlist_tags",
]
"""SQLAlchemy ORM models for the playlist curation API."""
