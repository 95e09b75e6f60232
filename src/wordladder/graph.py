"""The word graph: a word store doubling as breadth-first search scratch space.

Edges between words are never stored.  Two words are connected when they differ
in exactly one letter, which is checked on demand (or looked up in a
`PatternIndex`).  Each query resets every status, marks the target as the root,
and runs a breadth-first search back towards the origin, leaving a tree of
back-pointers from which the ladder is read off.

A `WordGraph` is not safe for concurrent queries: give each thread its own graph,
or serialize access.
"""

from collections import deque
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from typing import Literal

from sortedcontainers import SortedSet

from wordladder.config import config as ladder_config
from wordladder.errors import InvariantViolationError
from wordladder.index import PatternIndex
from wordladder.status import TARGET, UNKNOWN, UNMARKED, Mark, WordStatus, next_to
from wordladder.word import Word


@dataclass
class LadderResult:
    """Outcome of a ladder query."""

    status: Literal["found", "word_not_found", "no_path"]
    words: list[Word] = field(default_factory=list)
    """The ladder from origin to target inclusive, or empty."""
    missing: list[Word] = field(default_factory=list)
    """Query words that are not in the dictionary."""

    @property
    def found(self) -> bool:
        return self.status == "found"

    def strings(self) -> list[str]:
        """Return the ladder as decoded strings."""
        return [str(w) for w in self.words]

    def __str__(self) -> str:
        return " -> ".join(self.strings())


class WordGraph:
    """Dictionary of words, each with a status.

    Absent words have status UNKNOWN.  Stored words are UNMARKED until a search
    visits them.
    """

    def __init__(
        self,
        *,
        deterministic: bool | None = None,
        use_pattern_index: bool | None = None,
    ) -> None:
        """Create an empty graph.

        Args:
            deterministic: Enumerate adjacent words in sorted order.  Defaults to the
                configured value.
            use_pattern_index: Look up adjacent words in a `PatternIndex` rather than
                scanning the whole store.  Defaults to the configured value.
        """
        self.statuses: dict[Word, WordStatus] = {}
        self.deterministic = (
            ladder_config.deterministic if deterministic is None else deterministic
        )
        self.use_pattern_index = (
            ladder_config.use_pattern_index if use_pattern_index is None else use_pattern_index
        )
        self._index: PatternIndex | None = None

    @classmethod
    def from_words(cls, words: Iterable[Word], **kwargs: bool | None) -> "WordGraph":
        """Create a graph holding the given words (duplicates are ignored)."""
        graph = cls(**kwargs)
        for word in words:
            graph.add_word(word)
        return graph

    def __len__(self) -> int:
        return len(self.statuses)

    def __contains__(self, word: object) -> bool:
        return word in self.statuses

    # ---------- Word store ----------

    def add_word(self, word: Word) -> None:
        """Add a word with status UNMARKED, replacing any previous status."""
        if word not in self.statuses:
            self._index = None
        self.statuses[word] = UNMARKED

    def get(self, word: Word) -> WordStatus:
        """Return the status of a word, UNKNOWN if it is not in the dictionary."""
        return self.statuses.get(word, UNKNOWN)

    def _require_unmarked(self, word: Word, action: str) -> None:
        status = self.get(word)
        if status != UNMARKED:
            raise InvariantViolationError(
                f"Cannot {action} {word}: status is {status}, expected Unmarked.",
            )

    def mark_target(self, word: Word) -> None:
        """Mark an UNMARKED word as the search root."""
        self._require_unmarked(word, "mark as target")
        self.statuses[word] = TARGET

    def link(self, word: Word, neighbor: Word) -> None:
        """Point an UNMARKED word at its neighbor one step closer to the root."""
        self._require_unmarked(word, "link")
        self.statuses[word] = next_to(neighbor)

    def unmark_all(self) -> None:
        """Reset every word to UNMARKED, erasing the previous search tree."""
        for word in self.statuses:
            self.statuses[word] = UNMARKED

    def adjacent_words(self, word: Word) -> Collection[Word]:
        """Return the stored words that differ from `word` in exactly one letter."""
        if self.use_pattern_index:
            adjacent: Iterable[Word] = self._pattern_index().adjacent_words(word)
        else:
            adjacent = (w for w in self.statuses if w.is_adjacent(word))
        return SortedSet(adjacent) if self.deterministic else set(adjacent)

    def unvisited_adjacent_words(self, word: Word) -> list[Word]:
        """Return the adjacent words not yet visited by the current search."""
        return [w for w in self.adjacent_words(word) if self.get(w) == UNMARKED]

    def _pattern_index(self) -> PatternIndex:
        if self._index is None:
            self._index = PatternIndex(self.statuses)
        return self._index

    # ---------- Search ----------

    def search(self, target: Word, origin: Word) -> bool:
        """Breadth-first search from `target` until `origin` is reached.

        Every visited word is linked to the word it was discovered from, so the
        links form a tree rooted at `target` in which each word lies at its
        shortest distance from the root.

        Returns:
            True if `origin` was reached, False once every word reachable from
            `target` has been visited.

        Raises:
            InvariantViolationError: If `target` is not in the dictionary.
        """
        self.unmark_all()
        self.mark_target(target)
        to_visit: deque[Word] = deque([target])
        while to_visit:
            word = to_visit.popleft()
            if word == origin:
                return True
            for next_word in self.unvisited_adjacent_words(word):
                self.link(next_word, word)
                to_visit.append(next_word)
        return False

    def path(self, word: Word) -> list[Word]:
        """Follow back-pointers from `word` to the search root.

        Returns an empty list if `word` was not reached by the last search.

        Raises:
            InvariantViolationError: If the back-pointers form a cycle.
        """
        path: list[Word] = []
        # A path can never be longer than the dictionary
        while len(path) <= len(self.statuses):
            status = self.get(word)
            if status.mark == Mark.NEXT_TO:
                path.append(word)
                word = status.next
                continue
            if status.mark == Mark.TARGET:
                path.append(word)
            return path
        raise InvariantViolationError(f"Back-pointers starting at {path[0]} form a cycle.")

    # ---------- Queries ----------

    def find_ladder(self, origin: Word, target: Word) -> LadderResult:
        """Find a shortest ladder from `origin` to `target`.

        A word is its own ladder: if `origin == target` the result is `[origin]` and
        no search is run.
        """
        missing = [w for w in dict.fromkeys((origin, target)) if w not in self.statuses]
        if missing:
            return LadderResult("word_not_found", missing=missing)

        if origin == target:
            self.unmark_all()
            self.mark_target(target)
            return LadderResult("found", [origin])

        self.search(target, origin)
        words = self.path(origin)
        return LadderResult("found" if words else "no_path", words)

    def ladder(self, origin: Word, target: Word) -> list[Word]:
        """Return a shortest ladder from `origin` to `target`, or an empty list.

        An empty list means either word is missing from the dictionary or no ladder
        exists; use `find_ladder` to tell the two apart.
        """
        return self.find_ladder(origin, target).words
