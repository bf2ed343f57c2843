"""Curation endpoints; all of them are public under the access policy.

Successful responses are wrapped in ``ResultEnvelope`` because the curation
frontend reads ``code`` before ``data``. Errors keep FastAPI's ``detail`` body.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from curation_api.api.deps import get_db
from curation_api.models.curation import Curation
from curation_api.schema.base import ResultEnvelope
from curation_api.schema.curation import CurationCreate, CurationRead, CurationUpdate
from curation_api.services import curation_service
from curation_api.services.curation_service import CurationNotFoundError

router = APIRouter()

OK_CODE = "200-1"
CREATED_CODE = "201-1"


def _wrap(curation: Curation, code: str, msg: str) -> ResultEnvelope[CurationRead]:
    return ResultEnvelope[CurationRead](code=code, msg=msg, data=CurationRead.model_validate(curation))


@router.get("", response_model=ResultEnvelope[list[CurationRead]])
async def list_curations(
    tag: str | None = Query(default=None, max_length=64),
    session: AsyncSession = Depends(get_db),
) -> ResultEnvelope[list[CurationRead]]:
    """List curations, optionally narrowed to one tag."""
    curations = await curation_service.list_curations(session, tag)
    return ResultEnvelope[list[CurationRead]](
        code=OK_CODE,
        msg=f"Found {len(curations)} curations",
        data=[CurationRead.model_validate(curation) for curation in curations],
    )


@router.get("/{curation_id}", response_model=ResultEnvelope[CurationRead])
async def read_curation(
    curation_id: int, session: AsyncSession = Depends(get_db)
) -> ResultEnvelope[CurationRead]:
    try:
        curation = await curation_service.get_curation(session, curation_id)
    except CurationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _wrap(curation, OK_CODE, f"Curation {curation.id} found")


@router.post("", response_model=ResultEnvelope[CurationRead], status_code=status.HTTP_201_CREATED)
async def create_curation(
    payload: CurationCreate, session: AsyncSession = Depends(get_db)
) -> ResultEnvelope[CurationRead]:
    try:
        curation = await curation_service.create_curation(session, payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _wrap(curation, CREATED_CODE, f"Curation {curation.id} created")


@router.put("/{curation_id}", response_model=ResultEnvelope[CurationRead])
async def update_curation(
    curation_id: int, payload: CurationUpdate, session: AsyncSession = Depends(get_db)
) -> ResultEnvelope[CurationRead]:
    try:
        curation = await curation_service.update_curation(session, curation_id, payload)
    except CurationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _wrap(curation, OK_CODE, f"Curation {curation.id} updated")


@router.delete(
    "/{curation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    response_model=None,
)
async def delete_curation(curation_id: int, session: AsyncSession = Depends(get_db)) -> None:
    try:
        await curation_service.delete_curation(session, curation_id)
    except CurationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
