"""API router composition for all route groups."""

from fastapi import APIRouter

from .routes import curation, playlists

api_router = APIRouter()
api_router.include_router(playlists.router, prefix="/playlists", tags=["playlists"])
api_router.include_router(curation.router, prefix="/curation", tags=["curation"])
