"""
Domain errors raised by the joke store.

Each error carries the message and HTTP status code returned to the
client.  The API layer converts them into ``{"message": ...}`` JSON
responses (see ``jokes_api.app.api.error_handlers``); none of them is
fatal to the process.
"""

from fastapi import status


class JokeAPIError(Exception):
    """Base class for all errors reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"message": self.message}


class NotFoundError(JokeAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class BadRequestError(JokeAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class ForbiddenError(JokeAPIError):
    """Raised when the master key is missing or wrong."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class JokeNotFound(NotFoundError):
    default_message = "Joke not found"


class NoJokesForType(NotFoundError):
    default_message = "No jokes found for this type"


class MissingJokeType(BadRequestError):
    default_message = "Please provide a joke type"
