from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .types import ApiErrorDetails


class OpenAIError(Exception):
    """Base error thrown by the Python OpenAI client."""


class MissingTokenError(OpenAIError):
    """Raised when neither the config nor the environment provides a token."""


class MissingParameterError(OpenAIError):
    def __init__(self, field: str, request_type: str):
        super().__init__(f"missing required parameter `{field}` for {request_type}")
        self.field = field
        self.request_type = request_type


class ApiErrorResponse(OpenAIError):
    """The remote service answered with a structured error payload."""

    def __init__(self, details: "ApiErrorDetails", status_code: int | None = None):
        super().__init__(details.message)
        self.details = details
        self.status_code = status_code

    @property
    def code(self) -> Optional[str]:
        return self.details.code

    @property
    def param(self) -> Optional[str]:
        return self.details.param

    @property
    def type(self) -> Optional[str]:
        return self.details.type


class UnexpectedResponseError(OpenAIError):
    """The decoded body matched neither the success nor the error shape."""

    def __init__(self, raw: Any, status_code: int | None = None):
        super().__init__(f"unexpected json response: {str(raw)[:200]}")
        self.raw = raw
        self.status_code = status_code


class TransportError(OpenAIError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EncodeDecodeError(OpenAIError):
    """JSON encoding or decoding failed outside the response union."""
