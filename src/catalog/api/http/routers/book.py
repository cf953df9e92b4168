"""Book API router with CRUD and search operations."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from loguru import logger

from src.catalog.api.http.deps import get_catalog_service
from src.catalog.api.http.schemas import BookCreate, BookRead, BookUpdate
from src.catalog.core.services import CatalogService
from src.catalog.entities.book.entity import Book

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("/test")
def test() -> str:
    """Smoke-test endpoint."""
    return "API is working!"


@router.post("", response_model=BookRead, status_code=status.HTTP_201_CREATED)
def add_book(
    payload: BookCreate,
    service: CatalogService = Depends(get_catalog_service),
) -> Book:
    """Create a new book."""
    try:
        return service.add_book(payload.to_entity())
    except Exception:
        logger.exception("Failed to add book")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add book",
        ) from None


@router.get("", response_model=list[BookRead])
def list_books(
    service: CatalogService = Depends(get_catalog_service),
) -> list[Book]:
    """List all books."""
    return service.get_all_books()


@router.get("/search", response_model=list[BookRead])
def search_books(
    keyword: str = Query(..., description="Matched against title and author"),
    service: CatalogService = Depends(get_catalog_service),
) -> list[Book]:
    """Search books whose title or author contains the keyword."""
    return service.search_books(keyword)


@router.get("/search/title", response_model=list[BookRead])
def search_books_by_title(
    title: str = Query(...),
    service: CatalogService = Depends(get_catalog_service),
) -> list[Book]:
    return service.search_books_by_title(title)


@router.get("/search/author", response_model=list[BookRead])
def search_books_by_author(
    author: str = Query(...),
    service: CatalogService = Depends(get_catalog_service),
) -> list[Book]:
    return service.search_books_by_author(author)


@router.get("/{book_id}", response_model=BookRead)
def get_book(
    book_id: int,
    service: CatalogService = Depends(get_catalog_service),
) -> Book:
    """Get a book by ID."""
    book = service.get_book_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.put("/{book_id}", response_model=BookRead)
def update_book(
    book_id: int,
    payload: BookUpdate,
    service: CatalogService = Depends(get_catalog_service),
) -> Book:
    """Replace the title and author of a book."""
    try:
        updated_book = service.update_book(book_id, payload.to_entity())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    if updated_book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return updated_book


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: int,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Delete a book."""
    if not service.delete_book(book_id):
        raise HTTPException(status_code=404, detail="Book not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
