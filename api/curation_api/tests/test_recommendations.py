"""Tag-based playlist recommendation query."""

from __future__ import annotations

import logging

import pytest
from sqlalchemy.exc import OperationalError

from curation_api.models.tagging import Tag
from curation_api.services import playlist_service
from curation_api.services.playlist_service import DataAccessError, PlaylistNotFoundError
from curation_api.tests.utils import make_playlist


def _tag_named(playlist, name: str) -> Tag:
    return next(tag for tag in playlist.tags if tag.name == name)


@pytest.mark.asyncio
async def test_recommendations_for_shared_tag(session):
    a = await make_playlist(session, "A", ["rock", "pop"])
    b = await make_playlist(session, "B", ["pop"])
    await make_playlist(session, "C", ["jazz"])
    pop = _tag_named(a, "pop")

    for_a = await playlist_service.find_recommended(session, {pop}, a.id)
    assert {playlist.id for playlist in for_a} == {b.id}

    for_b = await playlist_service.find_recommended(session, {pop}, b.id)
    assert {playlist.id for playlist in for_b} == {a.id}


@pytest.mark.asyncio
async def test_recommendations_are_deduplicated(session):
    a = await make_playlist(session, "A", ["rock", "pop", "indie"])
    b = await make_playlist(session, "B", ["rock", "pop", "indie"])

    results = await playlist_service.find_recommended(session, a.tags, a.id)
    assert [playlist.id for playlist in results] == [b.id]


@pytest.mark.asyncio
async def test_recommendations_never_include_source_and_always_share_a_tag(session):
    tag_sets = [
        ["rock"],
        ["rock", "pop"],
        ["pop", "jazz"],
        ["jazz"],
        ["ambient"],
        ["rock", "jazz", "ambient"],
        [],
    ]
    playlists = [await make_playlist(session, f"P{index}", names) for index, names in enumerate(tag_sets)]

    for source in playlists:
        source_tag_ids = {tag.id for tag in source.tags}
        results = await playlist_service.find_recommended(session, source.tags, source.id)
        result_ids = [playlist.id for playlist in results]

        assert source.id not in result_ids
        assert len(result_ids) == len(set(result_ids))
        for playlist in results:
            assert source_tag_ids & {tag.id for tag in playlist.tags}

        expected = {
            other.id
            for other in playlists
            if other.id != source.id and source_tag_ids & {tag.id for tag in other.tags}
        }
        assert set(result_ids) == expected


@pytest.mark.asyncio
async def test_recommendations_accept_tag_ids(session):
    a = await make_playlist(session, "A", ["rock"])
    b = await make_playlist(session, "B", ["rock"])
    rock_id = _tag_named(a, "rock").id

    results = await playlist_service.find_recommended(session, [rock_id], a.id)
    assert [playlist.id for playlist in results] == [b.id]


@pytest.mark.asyncio
async def test_empty_tag_set_returns_empty_list(session, monkeypatch):
    await make_playlist(session, "A", ["rock"])

    async def _unexpected_execute(*args, **kwargs):
        raise AssertionError("query should not run for an empty tag set")

    monkeypatch.setattr(session, "execute", _unexpected_execute)
    assert await playlist_service.find_recommended(session, set(), 1) == []


@pytest.mark.asyncio
async def test_unused_tag_returns_empty_list(session):
    a = await make_playlist(session, "A", ["rock"])
    lonely = Tag(name="unused")
    session.add(lonely)
    await session.commit()

    assert await playlist_service.find_recommended(session, {lonely}, a.id) == []


@pytest.mark.asyncio
async def test_store_failure_raises_data_access_error(session, monkeypatch, caplog):
    async def _failing_execute(*args, **kwargs):
        raise OperationalError(
            "SELECT playlists",
            {},
            ConnectionRefusedError("connect to postgresql://curator:hunter2@db:5432/app refused"),
        )

    monkeypatch.setattr(session, "execute", _failing_execute)
    caplog.set_level(logging.WARNING, logger="curation_api.services.playlist_service")

    with pytest.raises(DataAccessError):
        await playlist_service.find_recommended(session, [1, 2], 3)

    assert "hunter2" not in caplog.text
    assert "postgresql://***@db:5432/app" in caplog.text


@pytest.mark.asyncio
async def test_recommend_for_playlist_uses_its_own_tags(session):
    a = await make_playlist(session, "A", ["rock", "pop"])
    b = await make_playlist(session, "B", ["pop"])
    c = await make_playlist(session, "C", ["rock"])
    await make_playlist(session, "D", ["jazz"])

    results = await playlist_service.recommend_for_playlist(session, a.id)
    assert {playlist.id for playlist in results} == {b.id, c.id}


@pytest.mark.asyncio
async def test_recommend_for_missing_playlist(session):
    with pytest.raises(PlaylistNotFoundError):
        await playlist_service.recommend_for_playlist(session, 999)


@pytest.mark.asyncio
async def test_recommend_for_playlist_wraps_lookup_failure(session, monkeypatch):
    playlist = await make_playlist(session, "A", ["rock"])

    async def _failing_execute(*args, **kwargs):
        raise OperationalError("SELECT playlists", {}, ConnectionRefusedError("refused"))

    monkeypatch.setattr(session, "execute", _failing_execute)

    with pytest.raises(DataAccessError, match="Playlist lookup failed"):
        await playlist_service.recommend_for_playlist(session, playlist.id)
