"""Data models for decoded dictionary definitions."""

from dataclasses import dataclass
from enum import Enum


class SenseCategory(Enum):
    """How the definition block holding a sense was introduced."""

    PLAIN = "plain"
    VERB = "verb"  # Block led by a verb divider ("vd")
    SLS = "sls"  # Block led by a subject/status label ("sls")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Sense:
    """A single definition unit.

    The text still carries the API's inline formatting tokens ({bc}, {sx|...||}, ...).
    """

    text: str
    category: SenseCategory = SenseCategory.PLAIN
    label: str | None = None  # Sense number, e.g. "1" or "2 a"

    def __str__(self) -> str:
        prefix = f"{self.label} " if self.label else ""
        return f"{prefix}{self.text} ({self.category})"


@dataclass(frozen=True)
class Entry:
    """One headword sense-group from the API."""

    senses: tuple[Sense, ...] = ()
    headword: str | None = None

    @property
    def sense_count(self) -> int:
        return len(self.senses)

    def __str__(self) -> str:
        return f"Entry(headword={self.headword!r}, senses={self.sense_count})"


@dataclass(frozen=True)
class Result:
    """Decoded outcome of a successful lookup, entries in API order."""

    entries: tuple[Entry, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Check if the lookup produced no entries at all."""
        return len(self.entries) == 0

    @property
    def sense_count(self) -> int:
        """Total number of senses across all entries."""
        return sum(entry.sense_count for entry in self.entries)

    def __str__(self) -> str:
        return f"Result(entries={len(self.entries)}, senses={self.sense_count})"
