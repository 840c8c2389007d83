"""Data models for Dictionary Lookup."""

from .definition import Entry, Result, Sense, SenseCategory
from .outcome import Failure, FailureKind, Outcome, Suggestions
from .request import LookupRequest, RequestState

__all__ = [
    "Sense",
    "SenseCategory",
    "Entry",
    "Result",
    "Suggestions",
    "Failure",
    "FailureKind",
    "Outcome",
    "LookupRequest",
    "RequestState",
]
