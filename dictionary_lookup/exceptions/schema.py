"""Response decoding exceptions."""

from .base import DictionaryLookupException


class SchemaError(DictionaryLookupException):
    """Raised when a response body does not have the expected top-level shape."""

    pass


class EntryDecodeError(SchemaError):
    """Raised when a single entry cannot be decoded.

    The decoder skips the entry instead of failing the whole response.
    """

    pass


class SenseDecodeError(EntryDecodeError):
    """Raised when a single sense cannot be decoded (missing dt or text)."""

    pass
