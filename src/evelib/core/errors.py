"""
evelib Errors

Exception hierarchy shared by the decoder, the dispatcher and the clients.

    EveLibError
    ├── DecodeError            payload does not fit the declared record type
    │   └── UnknownEnumToken   enum token matches neither a code nor a literal
    └── RequestError           transport failure or non-success response
        └── AuthenticationError  access token rejected (triggers refresh)
"""

import json
from typing import Any, Optional

import httpx

from .constants import AUTH_FAILURE_STATUS_CODES


class EveLibError(Exception):
    """Base class for all evelib errors."""

    error_type = "evelib_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to JSON-serializable dict."""
        return {"error": self.error_type, "message": self.message}


class DecodeError(EveLibError):
    """A payload is malformed or does not match its declared record type."""

    error_type = "decode_error"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        row_index: Optional[int] = None,
    ) -> None:
        self.field = field
        self.row_index = row_index
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field is not None:
            result["field"] = self.field
        if self.row_index is not None:
            result["row_index"] = self.row_index
        return result


class UnknownEnumToken(DecodeError):
    """An enumerated wire field carried a token with no canonical value."""

    error_type = "unknown_enum_token"

    def __init__(
        self,
        token: Any,
        enum_name: str,
        field: Optional[str] = None,
        row_index: Optional[int] = None,
    ) -> None:
        self.token = token
        self.enum_name = enum_name
        message = f"Unknown {enum_name} token {token!r}"
        if field is not None:
            message += f" in field '{field}'"
        if row_index is not None:
            message += f" at row {row_index}"
        super().__init__(message, field=field, row_index=row_index)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["token"] = self.token
        result["enum"] = self.enum_name
        return result


class RequestError(EveLibError):
    """Transport failure, non-success HTTP status or API error document."""

    error_type = "request_error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        api_code: Optional[int] = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        self.api_code = api_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.status_code:
            result["status_code"] = self.status_code
        if self.url:
            result["url"] = self.url
        if self.api_code is not None:
            result["api_code"] = self.api_code
        return result


class AuthenticationError(RequestError):
    """The remote API rejected the access token."""

    error_type = "authentication_error"


def _error_message(response: httpx.Response, fallback: str) -> str:
    """Pull a human-readable message out of an error response body."""
    try:
        body = response.json()
    except (json.JSONDecodeError, ValueError):
        return response.text or fallback

    if isinstance(body, dict):
        for key in ("message", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return response.text or fallback


def classify_httpx_error(error: httpx.HTTPStatusError) -> RequestError:
    """
    Convert an httpx status error into the matching evelib error.

    Only statuses in AUTH_FAILURE_STATUS_CODES become AuthenticationError;
    everything else is a plain RequestError.

    Args:
        error: The httpx HTTPStatusError to classify

    Returns:
        AuthenticationError or RequestError carrying status code and URL
    """
    response = error.response
    status_code = response.status_code
    message = _error_message(response, str(error))
    url = str(error.request.url)

    if status_code in AUTH_FAILURE_STATUS_CODES:
        return AuthenticationError(message, status_code=status_code, url=url)
    return RequestError(message, status_code=status_code, url=url)
