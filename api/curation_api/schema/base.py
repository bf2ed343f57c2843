"""Shared schema base classes for API responses."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ORMModel(BaseModel):
    """Base model that supports orm_mode for SQLAlchemy."""

    model_config = {"from_attributes": True}


class Timestamped(ORMModel):
    """Common timestamps for resource schemas."""
    id: int
    created_at: datetime
    updated_at: datetime


class ResultEnvelope(BaseModel, Generic[DataT]):
    """``{code, msg, data}`` wrapper the curation frontend checks before reading ``data``.

    ``code`` is ``"<http status>-<variant>"``, e.g. ``"200-1"``.
    """
    code: str
    msg: str
    data: DataT
