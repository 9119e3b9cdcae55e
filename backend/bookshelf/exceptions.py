"""
Bookshelf Backend: Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for the book endpoints.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by BookService; caught by global handlers.

Exception Hierarchy:
    BookshelfError (base)        → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (bad id, missing id)
    ├── NotFoundError            → 404 Not Found
    └── OutOfStockError          → 400 Bad Request (quantity exhausted)

The `message` of each exception is safe to return to clients; `context`
is extra detail that handlers may log or echo under "details".
"""

from typing import Any, Dict, Optional


class BookshelfError(Exception):
    """
    Base exception for all Bookshelf application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional structured info about the failure
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BookshelfError):
    """
    Raised when client input fails validation.

    When:    Non-integer book id, missing `id` query parameter.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid ID",
            "details": {"field": "id", "value": "abc"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(BookshelfError):
    """
    Raised when a requested book does not exist.

    When:    GET /books/{id} or GET /checkout?id=N with an unknown id.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        message: str = "Book not found.",
        resource_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = "book"
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class OutOfStockError(BookshelfError):
    """
    Raised when checking out a book whose quantity is already zero.

    HTTP:    400 Bad Request
    The book is left untouched; quantity never goes below zero.
    """

    def __init__(
        self,
        book_id: int,
        message: str = "Book not available.",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource_id"] = book_id
        super().__init__(message=message, context=ctx)
        self.book_id = book_id
