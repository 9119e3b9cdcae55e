"""
Bookshelf Backend: Checkout Route Handler
============================================

What:  Handles GET /checkout?id=N, which takes one copy of a book off the shelf.
How:   Passes the first raw `id` query value (None when absent) to BookService.

Request Flow:
    1. Client sends GET /checkout?id=2
    2. BookService validates the id, finds the book, checks stock
    3. Return 200 with the book after its quantity was decremented

Error responses (handled by global exception handlers):
    HTTP 400: Missing or non-integer id (ValidationError)
    HTTP 404: Unknown id (NotFoundError)
    HTTP 400: Quantity already zero (OutOfStockError)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from bookshelf.schemas.book import BookResponse, ErrorResponse
from bookshelf.services.book_service import book_service
from bookshelf.store import BookStore, get_store

router = APIRouter(tags=["Checkout"])


@router.get(
    "/checkout",
    response_model=BookResponse,
    responses={
        200: {"description": "Book checked out", "model": BookResponse},
        400: {"description": "Missing/invalid id or book not available", "model": ErrorResponse},
        404: {"description": "Book not found", "model": ErrorResponse},
    },
    summary="Check out one copy of a book",
    description="Decrements the quantity of the book identified by the `id` query parameter.",
)
async def checkout_book(
    book_ids: Optional[List[str]] = Query(
        default=None,
        alias="id",
        description="Identifier of the book to check out (first value wins when repeated)",
    ),
    store: BookStore = Depends(get_store),
) -> BookResponse:
    book_id = book_ids[0] if book_ids else None
    return await book_service.checkout_book(store, book_id)
