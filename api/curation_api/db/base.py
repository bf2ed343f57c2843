"""Import all models here for Alembic autogenerate."""

from curation_api.db.base_class import Base
from curation_api.models import curation, playlist, tagging, user  # noqa: F401

__all__ = ["Base"]
