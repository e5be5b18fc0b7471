"""
Response materialization: status check, JSON decode, typed result.

Materialization is all-or-nothing.  A call either returns a fully validated
model or raises; partially populated results are never handed back.
"""

import json
from typing import Any, Type, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import DecodeError, error_for_status

ModelT = TypeVar("ModelT", bound=BaseModel)

# Keys the service uses for the human-readable part of an error body, in order
# of preference.
_MESSAGE_KEYS = ("error", "message", "description")


def error_message(response: httpx.Response) -> str:
    """Extract the server-provided error message, falling back to the reason phrase."""
    try:
        body: Any = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = None

    if isinstance(body, dict):
        for key in _MESSAGE_KEYS:
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
            if isinstance(value, dict) and isinstance(value.get("message"), str):
                return value["message"]

    text = response.text.strip() if response.content else ""
    if text and body is None:
        return text
    return response.reason_phrase or "Unknown error"


def raise_for_status(response: httpx.Response) -> None:
    """
    Raise the matching :class:`ApiError` subclass for a non-2xx response.

    Raises:
        ApiError: With ``status_code``, ``message`` and ``response`` set.
    """
    if response.is_success:
        return
    error_cls = error_for_status(response.status_code)
    raise error_cls(response.status_code, error_message(response), response=response)


def materialize(response: httpx.Response, model: Type[ModelT]) -> ModelT:
    """
    Decode a JSON response into ``model``.

    Raises:
        ApiError: If the status is not 2xx.
        DecodeError: If the body is not JSON or does not fit ``model``.
    """
    raise_for_status(response)
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(
            f"Expected a JSON {model.__name__} but the body is not valid JSON: {exc}",
            response=response,
        ) from exc

    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise DecodeError(
            f"Response body does not match {model.__name__}: {exc}",
            response=response,
        ) from exc


def materialize_void(response: httpx.Response) -> None:
    """Check the status of a call with no result; the body is discarded."""
    raise_for_status(response)
    return None
