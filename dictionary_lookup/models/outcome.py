"""Data models for lookup outcomes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Union

from dictionary_lookup.exceptions import SchemaError, SetupError, TransportError

from .definition import Result


@dataclass(frozen=True)
class Suggestions:
    """Alternate spellings offered when the API has no direct match.

    This is a regular outcome, not an error.
    """

    terms: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __str__(self) -> str:
        return f"Suggestions({', '.join(self.terms)})"


class FailureKind(Enum):
    """Where a lookup failed."""

    TRANSPORT = "transport"
    SCHEMA = "schema"
    SETUP = "setup"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Failure:
    """Error outcome of a lookup, carrying the text shown to the user."""

    kind: FailureKind
    message: str
    status_code: int | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> Failure:
        """Build a failure from any exception raised during a lookup.

        Args:
            exc: Exception caught at the worker boundary

        Returns:
            Failure with the kind matching the exception type
        """
        message = str(exc) or exc.__class__.__name__
        if isinstance(exc, TransportError):
            return cls(FailureKind.TRANSPORT, message, exc.status_code)
        if isinstance(exc, SchemaError):
            return cls(FailureKind.SCHEMA, message)
        if isinstance(exc, SetupError):
            return cls(FailureKind.SETUP, message)
        return cls(FailureKind.INTERNAL, f"Unexpected error: {message}")

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


# Exactly one of these is delivered per request
Outcome = Union[Result, Suggestions, Failure]
