"""
Bookshelf Backend: Books Route Handlers
==========================================

What:  Handles GET /books (list), POST /books (create) and GET /books/{id} (detail).
How:   Extracts the body or path parameter, delegates to BookService, returns JSON.

The {book_id} path segment is received as a plain string so that BookService
can answer non-numeric ids with a 400 "Invalid ID" instead of FastAPI's
default 422.
"""

from typing import List

from fastapi import APIRouter, Depends

from bookshelf.schemas.book import BookCreate, BookResponse, ErrorResponse
from bookshelf.services.book_service import book_service
from bookshelf.store import BookStore, get_store

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(tags=["Books"])


@router.get(
    "/books",
    response_model=List[BookResponse],
    summary="List all books",
    description="Returns every book on the shelf in insertion order.",
)
async def list_books(store: BookStore = Depends(get_store)) -> List[BookResponse]:
    return await book_service.list_books(store)


@router.post(
    "/books",
    status_code=201,
    response_model=BookResponse,
    responses={
        201: {"description": "Book created", "model": BookResponse},
        400: {"description": "Invalid JSON body", "model": ErrorResponse},
    },
    summary="Create a book",
    description=(
        "Appends a new book to the shelf and echoes it back. "
        "The id is not checked for uniqueness."
    ),
)
async def create_book(
    payload: BookCreate,
    store: BookStore = Depends(get_store),
) -> BookResponse:
    """
    Create a book.

    Error responses (handled by global exception handlers):
        HTTP 400: Body is not JSON or does not match BookCreate
    """
    return await book_service.create_book(store, payload)


@router.get(
    "/books/{book_id}",
    response_model=BookResponse,
    responses={
        200: {"description": "The book", "model": BookResponse},
        400: {"description": "Invalid ID", "model": ErrorResponse},
        404: {"description": "Book not found", "model": ErrorResponse},
    },
    summary="Get a single book by ID",
)
async def get_book(
    book_id: str,
    store: BookStore = Depends(get_store),
) -> BookResponse:
    return await book_service.get_book(store, book_id)
