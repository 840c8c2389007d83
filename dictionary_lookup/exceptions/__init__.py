"""Custom exceptions for Dictionary Lookup."""

from .base import DictionaryLookupException
from .schema import EntryDecodeError, SchemaError, SenseDecodeError
from .transport import TransportError
from .validation import SetupError

__all__ = [
    "DictionaryLookupException",
    "TransportError",
    "SchemaError",
    "EntryDecodeError",
    "SenseDecodeError",
    "SetupError",
]
