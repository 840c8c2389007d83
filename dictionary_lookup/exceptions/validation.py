"""Setup-related exceptions."""

from .base import DictionaryLookupException


class SetupError(DictionaryLookupException):
    """Raised when the application is not configured to run lookups (missing API key, etc)."""

    pass
