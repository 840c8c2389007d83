"""Presenter protocol for output abstraction."""

from typing import Protocol

from dictionary_lookup.models import Failure, Result, Suggestions


class PresenterProtocol(Protocol):
    """Interface for presenting lookup outcomes to the user (CLI, GUI, etc).

    Suggestions and failures have their own methods so that a list of
    alternate spellings is never shown as an error.
    """

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_result(self, term: str, result: Result) -> None:
        """Display the decoded definitions for a term.

        Args:
            term: The term that was looked up
            result: Decoded entries and senses
        """
        ...

    def show_suggestions(self, term: str, suggestions: Suggestions) -> None:
        """Offer alternate spellings for a term with no direct match.

        Args:
            term: The term that was looked up
            suggestions: Candidate spellings in API order
        """
        ...

    def show_failure(self, term: str, failure: Failure) -> None:
        """Display a failed lookup.

        Args:
            term: The term that was looked up
            failure: What went wrong
        """
        ...
