"""
Bookshelf Backend: Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract for the book endpoints.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate the OpenAPI documentation.

Schemas are separate from the Book record so the wire format stays fixed
even if the in-memory model grows fields.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models - What the client sends
# ══════════════════════════════════════════════════════════════════════════


class BookCreate(BaseModel):
    """
    What:  Body of POST /books.
    Rules:
        - id, title, author are required
        - quantity defaults to 0 and may not be negative
        - id uniqueness is NOT checked; the new record is simply appended
        - strict types: "4", 4.0 and true are not integers
    """
    id: int = Field(ge=-(2 ** 63), le=2 ** 63 - 1, description="Book identifier (assumed unique)")
    title: str = Field(description="Book title")
    author: str = Field(description="Author name")
    quantity: int = Field(default=0, ge=0, description="Copies available for checkout")

    model_config = ConfigDict(strict=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models - What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class BookResponse(BaseModel):
    """
    What:  Full representation of a book.
    Who:   Returned by every book endpoint (list items, create, fetch, checkout).
    """
    id: int = Field(description="Book identifier")
    title: str = Field(description="Book title")
    author: str = Field(description="Author name")
    quantity: int = Field(description="Copies currently available")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models - Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description ("Book not found.")
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "out_of_stock",
            "message": "Book not available.",
            "details": {"resource_id": 1},
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response. Returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    books: int = Field(description="Number of records currently on the shelf")
    uptime_seconds: float = Field(description="Seconds since service started")
