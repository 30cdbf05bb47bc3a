"""Persistence: database, models and repositories."""

from freequo_dispatch.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
)
from freequo_dispatch.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database"]
