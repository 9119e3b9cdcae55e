"""
Bookshelf Backend: Book Service (Business Logic)
===================================================

What:  The four book operations: list, create, fetch by id, checkout.
Why:   Keeps id parsing and stock rules out of the route handlers.
How:   Operates on the BookStore passed in by the caller and raises
       application exceptions that main.py maps to HTTP responses.
Who:   Called by the /books and /checkout route handlers.

Checkout Flow (GET /checkout?id=N):
    ┌──────────┐    ┌──────────┐    ┌──────────┐    ┌──────────────┐
    │ id given?│───▶│ integer? │───▶│  found?  │───▶│ quantity > 0 │───▶ quantity -= 1
    └──────────┘    └──────────┘    └──────────┘    └──────────────┘
         │ no            │ no            │ no               │ no
         ▼               ▼               ▼                  ▼
    ValidationError ValidationError NotFoundError     OutOfStockError
    (400)           (400)           (404)             (400)

NOTE: BookService is stateless. The store is an argument so tests can hand
in a private BookStore instead of the shared one.
"""

import logging
import re
from typing import List, Optional

from bookshelf.exceptions import NotFoundError, OutOfStockError, ValidationError
from bookshelf.models.book import Book
from bookshelf.schemas.book import BookCreate, BookResponse
from bookshelf.store import BookStore

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits, nothing else
_BOOK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Ids are 64-bit signed integers
BOOK_ID_MIN = -(2 ** 63)
BOOK_ID_MAX = 2 ** 63 - 1


def parse_book_id(raw: Optional[str], field: str = "id") -> int:
    """
    Convert a raw path or query value into a book id.

    Accepts "7", "+7" and "-7". Whitespace, decimals, empty strings and
    anything non-numeric raise ValidationError("Invalid ID"), as do values
    outside the signed 64-bit range.
    """
    if raw is not None and _BOOK_ID_PATTERN.fullmatch(raw):
        book_id = int(raw)
        if BOOK_ID_MIN <= book_id <= BOOK_ID_MAX:
            return book_id
    raise ValidationError(
        message="Invalid ID",
        field=field,
        context={"value": raw},
    )


class BookService:
    """
    Business logic layer for book operations.

    Responsibilities:
        - list_books(): Every record in insertion order
        - create_book(): Append a validated record and echo it back
        - get_book(): Single record lookup with id parsing and not-found handling
        - checkout_book(): Decrement stock by one, refusing at zero
    """

    async def list_books(self, store: BookStore) -> List[BookResponse]:
        books = store.all()
        logger.debug("Listing %d books", len(books))
        return [BookResponse.model_validate(book) for book in books]

    async def create_book(self, store: BookStore, data: BookCreate) -> BookResponse:
        """
        Append a new book to the shelf.

        The id is taken from the request as-is; an existing record with the
        same id stays where it is and keeps answering lookups.
        """
        book = store.add(Book(**data.model_dump()))
        logger.info("Created book %d: %r by %s", book.id, book.title, book.author)
        return BookResponse.model_validate(book)

    async def get_book(self, store: BookStore, raw_id: str) -> BookResponse:
        """
        Fetch a single book.

        Raises:
            ValidationError: raw_id is not an integer (→ 400)
            NotFoundError: No book with that id (→ 404)
        """
        book_id = parse_book_id(raw_id)
        book = store.find(book_id)
        if book is None:
            raise NotFoundError(resource_id=book_id)
        return BookResponse.model_validate(book)

    async def checkout_book(self, store: BookStore, raw_id: Optional[str]) -> BookResponse:
        """
        Check out one copy of a book.

        Args:
            store: The shelf to operate on
            raw_id: Value of the `id` query parameter, None when absent

        Returns:
            The book after its quantity was decremented.

        Raises:
            ValidationError: Missing or non-integer id (→ 400)
            NotFoundError: No book with that id (→ 404)
            OutOfStockError: quantity is already zero (→ 400)
        """
        if raw_id is None:
            raise ValidationError(message="Missing query parameter", field="id")
        book_id = parse_book_id(raw_id)

        # Check and decrement must not interleave with another checkout
        with store.lock:
            book = store.find(book_id)
            if book is None:
                raise NotFoundError(resource_id=book_id)
            if not book.available:
                logger.info("Checkout refused for book %d: out of stock", book_id)
                raise OutOfStockError(book_id=book_id)
            book.quantity -= 1
            result = BookResponse.model_validate(book)

        logger.info("Checked out book %d (%d left)", book_id, result.quantity)
        return result


# ── Singleton Instance ────────────────────────────────────────────────────
book_service = BookService()
