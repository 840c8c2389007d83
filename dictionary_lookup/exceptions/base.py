"""Base exception classes for Dictionary Lookup."""


class DictionaryLookupException(Exception):
    """Base exception for all Dictionary Lookup errors.

    All custom exceptions in the dictionary_lookup package should inherit
    from this base class for consistent error handling.
    """

    pass
