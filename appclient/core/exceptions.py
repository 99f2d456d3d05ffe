"""
Exceptions raised by appclient.

Three failure families reach the caller of a call or upload:
transport failures (no response), API errors (failure status) and
decode failures (response body is not the expected JSON).
"""
from typing import Optional


class AppClientException(Exception):
    """Base exception for all appclient errors."""


class ApiError(AppClientException):
    """
    Raised when the server answers with a failure status.
    
    Attributes:
        message: Human readable message from the server
        code: Numeric error code (server code, or HTTP status for non-JSON bodies)
        type: Error type tag from the server ("" when absent)
        response: Raw response body text
        status: HTTP status code of the response
    """
    
    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        type: str = "",
        response: Optional[str] = None,
        status: Optional[int] = None
    ) -> None:
        self.message = message
        self.code = code
        self.type = type
        self.response = response
        self.status = status if status is not None else code
        super().__init__(message)
    
    def __str__(self) -> str:
        if self.code is not None:
            return f"{self.code}: {self.message}"
        return self.message
    
    def __repr__(self) -> str:
        return (
            f"ApiError(message={self.message!r}, code={self.code!r}, "
            f"type={self.type!r})"
        )


class TransportError(AppClientException):
    """Raised when the request failed before any response was received."""


class DecodeError(AppClientException):
    """Raised when a response body could not be decoded as expected."""
    
    def __init__(self, message: str, body: Optional[str] = None) -> None:
        self.body = body
        super().__init__(message)
