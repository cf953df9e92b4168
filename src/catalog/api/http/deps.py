"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import CatalogService
from src.catalog.core.storage.book_storage import BookStorage
from src.catalog.entities.book.repository import BookRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_book_storage(request: Request) -> Iterator[BookStorage]:
    """Get the book storage for this request."""
    app_deps = get_app_dependencies(request)
    if app_deps.memory_storage is not None:
        yield app_deps.memory_storage
        return

    if app_deps.database_service is None:
        raise RuntimeError("No book storage is configured")

    session = app_deps.database_service.get_session()
    try:
        yield BookRepository(session)
    finally:
        session.close()


def get_catalog_service(
    storage: BookStorage = Depends(get_book_storage),
) -> CatalogService:
    """Get the Catalog service instance."""
    return CatalogService(storage)
