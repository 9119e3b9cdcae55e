"""
Bookshelf Backend: Request ID Middleware
===========================================

What:  Tags every request with a short correlation ID and echoes it back.
How:   Reuses a well-formed incoming X-Request-ID header or generates one,
       stores it in a ContextVar (for loggers and exception handlers) and in
       request.state (for route handlers), and sets it on the response.
When:  Outermost application middleware, so every later layer can read it.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Client-supplied IDs are echoed into logs and headers; keep them tame
_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")


def new_request_id() -> str:
    """8 hex chars; plenty for correlating log lines."""
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. If the client sent a valid X-Request-ID header, use it
        2. Otherwise generate a new 8-character ID
        3. Store it in request_id_var and request.state.request_id
        4. Add it to the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER, "")
        rid = incoming if _VALID_REQUEST_ID.fullmatch(incoming) else new_request_id()

        # Not reset afterwards: the catch-all 500 handler runs outside this
        # middleware and still needs the ID. Each request has its own context.
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
