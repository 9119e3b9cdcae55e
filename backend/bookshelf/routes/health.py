"""
Bookshelf Backend: Health Check Route
========================================

What:  Health check endpoint for monitoring and load balancer checks.
How:   Reports version, uptime and how many books are on the shelf.
       The store lives in process memory, so there is no external
       dependency to check and the service is healthy whenever it answers.
"""

import time

from fastapi import APIRouter, Depends

from bookshelf import __version__
from bookshelf.schemas.book import HealthResponse
from bookshelf.store import BookStore, get_store

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: BookStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        books=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
