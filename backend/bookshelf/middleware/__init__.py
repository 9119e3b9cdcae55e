# Middleware package init
"""
Bookshelf Backend: Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    Request ID runs first so the logging middleware can tag each access
    line with it. The ID is also echoed back in the X-Request-ID header.
"""
