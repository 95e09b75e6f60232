"""Wildcard pattern index for fast adjacency lookups."""

from collections.abc import Iterable

from bitarray import bitarray
from bitarray.util import ones, zeros

from wordladder.word import Word

WordBuckets = dict[int, list[dict[int, bitarray]]]
"""Element [length][pos][byte] is a bit array over `words_by_length[length]`.

Bit `i` is True if the `i`th word of that length has `byte` at position `pos`.
"""


class PatternIndex:
    """Index of words by the character at each position.

    A word adjacent to `w` matches `w` at every position but one, i.e. it matches
    one of the wildcard patterns obtained by replacing a single position of `w`
    with a placeholder.  Each pattern is answered by intersecting the bit arrays of
    its fixed positions.

    The index is a snapshot: words added to a store afterwards are not seen.
    """

    def __init__(self, words: Iterable[Word]) -> None:
        self.words_by_length: dict[int, list[Word]] = {}
        """Words bucketed by length, each bucket sorted by packed value."""

        for word in sorted(set(words)):
            self.words_by_length.setdefault(len(word), []).append(word)

        self.positions: dict[Word, int] = {}
        """Maps each word to its index in `words_by_length[len(word)]`."""

        for bucket in self.words_by_length.values():
            self.positions.update({w: i for i, w in enumerate(bucket)})

        self.buckets: WordBuckets = self._create_buckets()

    def _create_buckets(self) -> WordBuckets:
        buckets: WordBuckets = {}
        for length, bucket in self.words_by_length.items():
            by_position: list[dict[int, bitarray]] = [{} for _ in range(length)]
            for word_index, word in enumerate(bucket):
                for pos, ch in enumerate(word.chars()):
                    bits = by_position[pos].get(ch)
                    if bits is None:
                        bits = by_position[pos][ch] = zeros(len(bucket))
                    bits[word_index] = True
            buckets[length] = by_position
        return buckets

    def __len__(self) -> int:
        return len(self.positions)

    def matching(self, word: Word, wildcard: int) -> bitarray:
        """Return the bits of words matching `word` everywhere except at position `wildcard`."""
        length = len(word)
        if length not in self.buckets:
            return zeros(0)
        bits = ones(len(self.words_by_length[length]))
        for pos, ch in enumerate(word.chars()):
            if pos == wildcard:
                continue
            char_bits = self.buckets[length][pos].get(ch)
            if char_bits is None:
                bits.setall(False)
                break
            bits &= char_bits
            if not bits.any():
                break
        return bits

    def adjacent_words(self, word: Word) -> list[Word]:
        """Return the indexed words adjacent to `word`, sorted by packed value."""
        length = len(word)
        bucket = self.words_by_length.get(length)
        if not bucket:
            return []

        found = zeros(len(bucket))
        for wildcard in range(length):
            found |= self.matching(word, wildcard)

        # A word matches all of its own patterns
        own_index = self.positions.get(word)
        if own_index is not None:
            found[own_index] = False

        return [bucket[i] for i in found.search(1)]
