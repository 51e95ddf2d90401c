"""Exception handlers that shape error responses.

HTTP errors are answered with their detail as a plain-text body, so a
missing student reads exactly `Not Found`. Body decoding failures keep
FastAPI's default 422 JSON payload.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("student_api.api")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    if exc.status_code >= 500:
        logger.error("http_error %s %s -> %s", request.method, request.url.path, exc.status_code)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def register_error_handlers(app: FastAPI) -> None:
    """Install the plain-text HTTP error handler on `app`."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
