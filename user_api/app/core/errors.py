"""
Application-wide exception handlers.

Unmatched routes are answered with the same envelope the user
endpoints use.  A known path requested with an unsupported method is
treated as an unmatched route too, so clients see a single 404 instead
of FastAPI's 405.  Request bodies FastAPI cannot parse into the
expected schema become a 400 envelope instead of a 422 with validation
details.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_api.app.schemas.envelope import failure

logger = logging.getLogger(__name__)

_UNMATCHED = {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}


async def route_not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in _UNMATCHED:
        return failure(status.HTTP_404_NOT_FOUND, "Route not found")
    return await http_exception_handler(request, exc)


async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.debug("Rejected request body for %s %s: %s", request.method, request.url.path, exc.errors())
    return failure(status.HTTP_400_BAD_REQUEST, "Invalid request body")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, route_not_found_handler)
    app.add_exception_handler(RequestValidationError, invalid_body_handler)
