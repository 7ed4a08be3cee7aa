"""
Global exception handlers.

Domain errors raised by the service layer carry their own status code
and message; they are rendered as ``{"message": ...}`` so that every
failure response has the same shape as the success messages.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from jokes_api.app.core.errors import JokeAPIError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(JokeAPIError)
    async def joke_api_error_handler(request: Request, exc: JokeAPIError) -> JSONResponse:
        logger.warning(
            "%s %s -> %s %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())
