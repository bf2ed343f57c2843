from . import curation_service, playlist_service, tag_service, user_service

__all__ = [
    "curation_service",
    "playlist_service",
    "tag_service",
    "user_service",
]
"""Service-layer helpers for API operations."""
