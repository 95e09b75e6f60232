"""Compact word keys and the one-letter adjacency relation."""

from dataclasses import dataclass

from wordladder.errors import WordEncodingError

MAX_WORD_BYTES = 8
"""Number of bytes that fit in one word key (a 64-bit unsigned integer)."""

BYTE_MASK = 0xFF


@dataclass(frozen=True, order=True, repr=False)
class Word:
    """A dictionary word packed into a single unsigned integer.

    Each character occupies one byte, first character in the most significant
    position, so the string "cat" is stored as `0x636174`.  Two words are equal
    exactly when their source strings are equal, and ordering follows the packed
    integer.
    """

    value: int
    """The packed integer."""

    @classmethod
    def from_str(cls, s: str) -> "Word":
        """Encode a string into a word key.

        Args:
            s: An ASCII string of at most 8 characters, with no null characters.

        Raises:
            WordEncodingError: If the string is too long, is not ASCII, or contains
                a null character (which would not survive decoding).
        """
        try:
            data = s.encode("ascii")
        except UnicodeEncodeError:
            raise WordEncodingError(f"Word {s!r} contains non-ASCII characters.") from None
        if len(data) > MAX_WORD_BYTES:
            raise WordEncodingError(
                f"Word {s!r} is longer than {MAX_WORD_BYTES} characters.",
            )
        if 0 in data:
            raise WordEncodingError(f"Word {s!r} contains a null character.")

        value = 0
        for byte in data:
            value = (value << 8) + byte
        return cls(value)

    def __str__(self) -> str:
        """Decode the word back into its source string."""
        return self.chars().decode("ascii")

    def __repr__(self) -> str:
        return f"Word({str(self)!r})"

    def __len__(self) -> int:
        """Number of characters in the word."""
        return (self.value.bit_length() + 7) // 8

    def chars(self) -> bytes:
        """Return the character bytes of the word, first character first."""
        result = bytearray()
        n = self.value
        while n > 0:
            result.append(n & BYTE_MASK)
            n >>= 8
        result.reverse()
        return bytes(result)

    def is_adjacent(self, other: "Word") -> bool:
        """Return whether two words have the same length and differ in exactly one letter.

        Bytes are compared from the last character backwards.  At the first mismatch
        the remaining leading bytes must all be equal.  Running out of bytes on either
        side before a mismatch means the words are identical or of different lengths.
        """
        n = self.value
        m = other.value
        while n > 0 and m > 0:
            c = n & BYTE_MASK
            d = m & BYTE_MASK
            n >>= 8
            m >>= 8
            if c != d:
                return n == m
        return False
