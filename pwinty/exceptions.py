# file: pwinty/exceptions.py
"""
Error types raised by the Pwinty client.

Every failed call raises exactly one of:
    InternalError  - local problem (bad header value, encode/decode failure,
                     empty image batch)
    RequestError   - the HTTP transport failed (DNS, connect, timeout)
    ResponseError  - the server answered with a non-2xx status
"""

from typing import Optional


class PwintyError(Exception):
    """Base class for all client errors."""

    pass


class InternalError(PwintyError):
    """Raised for local failures that are not caused by the network."""

    pass


class RequestError(PwintyError):
    """Raised when the underlying HTTP call fails before a response arrives."""

    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original


class ResponseError(PwintyError):
    """Raised when the server replies with a non-success status code."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP error {status_code}")
        self.status_code = status_code
