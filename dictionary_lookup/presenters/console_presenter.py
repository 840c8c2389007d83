"""Console presenter for CLI output."""

import sys
from typing import TextIO

from dictionary_lookup.models import Failure, Outcome, Result, Suggestions
from dictionary_lookup.services.sense_formatter import format_sense_plain


class ConsolePresenter:
    """Present lookup outcomes to the console (CLI implementation)."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        """Initialize the presenter.

        Args:
            out: Stream for regular output (defaults to stdout)
            err: Stream for errors (defaults to stderr)
        """
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}", file=self.err)

    def show_result(self, term: str, result: Result) -> None:
        """Display every entry and sense for a term."""
        if result.is_empty:
            print(f"No definitions found for '{term}'", file=self.out)
            return

        for entry in result.entries:
            print(f"\n{entry.headword or term}", file=self.out)
            for sense in entry.senses:
                print(format_sense_plain(sense), file=self.out)

    def show_suggestions(self, term: str, suggestions: Suggestions) -> None:
        """Display alternate spellings for a term."""
        print(f"'{term}' not found. Did you mean:", file=self.out)
        for suggestion in suggestions:
            print(f"  {suggestion}", file=self.out)

    def show_failure(self, term: str, failure: Failure) -> None:
        """Display a failed lookup."""
        self.show_error(f"Lookup for '{term}' failed: {failure.message}")

    def show_outcome(self, term: str, outcome: Outcome) -> None:
        """Dispatch an outcome to the matching show_* method."""
        if isinstance(outcome, Suggestions):
            self.show_suggestions(term, outcome)
        elif isinstance(outcome, Failure):
            self.show_failure(term, outcome)
        else:
            self.show_result(term, outcome)
