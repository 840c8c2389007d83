"""Network and HTTP related exceptions."""

from .base import DictionaryLookupException


class TransportError(DictionaryLookupException):
    """Raised when the HTTPS exchange with the dictionary API fails.

    Covers DNS resolution, connect, TLS handshake, write and read failures,
    and non-2xx HTTP responses (in which case status_code is set).
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
