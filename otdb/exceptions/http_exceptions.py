from __future__ import annotations
from typing import Optional

from otdb.exceptions.base_exceptions import OTDBError


class TransportError(OTDBError):
    """Network level failure: connection refused, timeout, TLS..."""

    def __init__(self, cause: BaseException, *, url: Optional[str] = None):
        super().__init__(f"Transport error: {cause}")
        self.cause = cause
        self.url = url


class UnsuccessfulRequestError(OTDBError):
    """Non 200 and non 5xx response."""

    def __init__(self, status: int, text: str):
        super().__init__(f"Unsuccessful response, code: {status}, body: {text}", code=status)
        self.status = status
        self.text = text


class InternalServerError(OTDBError):
    """5xx response."""

    def __init__(self, text: str, *, status: int = 500):
        super().__init__(f"Internal server error: {text}", code=status)
        self.status = status
        self.text = text


class InvalidOptionError(OTDBError, ValueError):
    """Option rejected before any request is made."""

    def __init__(self, message: str):
        super().__init__(f"Invalid option: {message}")


class DecodeError(OTDBError):
    """Body of a successful response could not be decoded."""

    def __init__(self, cause: BaseException, *, body: Optional[str] = None):
        super().__init__(f"Decode error: {cause}")
        self.cause = cause
        # raw body, kept for diagnostics only
        self.body = body
