"""
Error taxonomy for the natural-language-classifier client.

Every error raised by this package derives from
:class:`NaturalLanguageClassifierError`, except network failures, which are
httpx's own :class:`httpx.TransportError` and are passed through untouched.
"""

from typing import Dict, Optional, Type

import httpx

# Network-level failures (connection refused, timeouts, ...) come straight from
# httpx.  The alias only gives callers a name to catch.
TransportError = httpx.TransportError


class NaturalLanguageClassifierError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(NaturalLanguageClassifierError, ValueError):
    """A required option is missing, empty, or the options object is None."""


class SourceConsumedError(NaturalLanguageClassifierError, RuntimeError):
    """A single-use training source was read a second time."""


class DecodeError(NaturalLanguageClassifierError):
    """The response body could not be decoded into the expected result type."""

    def __init__(self, message: str, response: Optional[httpx.Response] = None):
        super().__init__(message)
        self.response = response


class ApiError(NaturalLanguageClassifierError):
    """The service answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response: Optional[httpx.Response] = None,
    ):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.response = response

    @property
    def headers(self) -> Dict[str, str]:
        if self.response is None:
            return {}
        return dict(self.response.headers)


class BadRequestError(ApiError):
    """400 Bad Request."""


class UnauthorizedError(ApiError):
    """401 Unauthorized."""


class ForbiddenError(ApiError):
    """403 Forbidden."""


class NotFoundError(ApiError):
    """404 Not Found."""


class ConflictError(ApiError):
    """409 Conflict."""


class RequestTooLargeError(ApiError):
    """413 Request Entity Too Large."""


class UnsupportedMediaTypeError(ApiError):
    """415 Unsupported Media Type."""


class TooManyRequestsError(ApiError):
    """429 Too Many Requests."""


class InternalServerError(ApiError):
    """500 Internal Server Error."""


class ServiceUnavailableError(ApiError):
    """503 Service Unavailable."""


STATUS_ERRORS: Dict[int, Type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    413: RequestTooLargeError,
    415: UnsupportedMediaTypeError,
    429: TooManyRequestsError,
    500: InternalServerError,
    503: ServiceUnavailableError,
}


def error_for_status(status_code: int) -> Type[ApiError]:
    """Return the ApiError subclass that matches ``status_code``."""
    return STATUS_ERRORS.get(status_code, ApiError)
