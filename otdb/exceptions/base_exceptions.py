from typing import Optional


class OTDBError(Exception):
    """Base error of the library."""

    def __init__(self, message: str, *, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code
