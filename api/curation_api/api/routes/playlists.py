"""Playlist endpoints, including tag-based recommendations."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from curation_api.api.deps import get_current_user, get_db
from curation_api.models.user import User
from curation_api.schema.playlist import PlaylistCreate, PlaylistRead, PlaylistUpdate
from curation_api.services import playlist_service
from curation_api.services.playlist_service import (
    DataAccessError,
    PlaylistNotFoundError,
    PlaylistPermissionError,
)

router = APIRouter()


@router.get("", response_model=list[PlaylistRead])
async def list_playlists(session: AsyncSession = Depends(get_db)) -> list[PlaylistRead]:
    """List all playlists."""
    playlists = await playlist_service.list_playlists(session)
    return [PlaylistRead.model_validate(playlist) for playlist in playlists]


@router.get("/{playlist_id}", response_model=PlaylistRead)
async def read_playlist(playlist_id: int, session: AsyncSession = Depends(get_db)) -> PlaylistRead:
    """Fetch one playlist with its tags."""
    try:
        playlist = await playlist_service.get_playlist(session, playlist_id)
    except PlaylistNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return PlaylistRead.model_validate(playlist)


@router.post("", response_model=PlaylistRead, status_code=status.HTTP_201_CREATED)
async def create_playlist(
    payload: PlaylistCreate,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PlaylistRead:
    try:
        playlist = await playlist_service.create_playlist(session, current_user.id, payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PlaylistRead.model_validate(playlist)


@router.put("/{playlist_id}", response_model=PlaylistRead)
async def update_playlist(
    playlist_id: int,
    payload: PlaylistUpdate,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PlaylistRead:
    try:
        playlist = await playlist_service.update_playlist(session, playlist_id, current_user.id, payload)
    except PlaylistNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except PlaylistPermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PlaylistRead.model_validate(playlist)


@router.delete(
    "/{playlist_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    response_model=None,
)
async def delete_playlist(
    playlist_id: int,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    try:
        await playlist_service.delete_playlist(session, playlist_id, current_user.id)
    except PlaylistNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except PlaylistPermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc


@router.get("/{playlist_id}/recommendation", response_model=list[PlaylistRead])
async def recommend_playlists(
    playlist_id: int,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[PlaylistRead]:
    """Recommend other playlists that share at least one tag with this one."""
    try:
        playlists = await playlist_service.recommend_for_playlist(session, playlist_id)
    except PlaylistNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except DataAccessError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return [PlaylistRead.model_validate(playlist) for playlist in playlists]
