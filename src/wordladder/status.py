"""Per-word status used for dictionary membership and as search scratch space."""

from enum import IntEnum
from typing import NamedTuple

from wordladder.word import Word


class Mark(IntEnum):
    """Kinds of word status."""

    UNKNOWN = 0
    """Not a dictionary word.  Never stored, only reported for absent words."""

    UNMARKED = 1
    """A dictionary word not yet visited by the current search."""

    TARGET = 2
    """The root of the current search."""

    NEXT_TO = 3
    """Visited by the current search; `next` is one step closer to the root."""


class WordStatus(NamedTuple):
    """Immutable status value stored against each word."""

    mark: Mark
    next: Word | None = None

    def __str__(self) -> str:
        if self.mark == Mark.NEXT_TO:
            return f"NextTo({self.next})"
        return self.mark.name.title()


UNKNOWN = WordStatus(Mark.UNKNOWN)
UNMARKED = WordStatus(Mark.UNMARKED)
TARGET = WordStatus(Mark.TARGET)


def next_to(word: Word) -> WordStatus:
    """Status of a visited word whose back-pointer is `word`."""
    return WordStatus(Mark.NEXT_TO, word)
