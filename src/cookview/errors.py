"""Exceptions raised by cookview."""

from typing import Any


class CookviewError(Exception):
    """Base class for cookview errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidPayloadError(CookviewError):
    """A recipe payload could not be decoded into a Recipe."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(message)


class RecipeApiError(CookviewError):
    """The recipe server could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class RecipeNotFoundError(RecipeApiError):
    """The requested recipe does not exist on the server."""
