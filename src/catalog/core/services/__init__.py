"""Core services exports."""

from .catalog_service import CatalogService
from .database.db_session import DbSessionService

__all__ = [
    "CatalogService",
    "DbSessionService",
]
