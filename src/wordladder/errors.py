"""Exceptions raised by the word ladder package."""


class LadderError(Exception):
    """Base class for all word ladder errors."""


class WordEncodingError(LadderError, ValueError):
    """A string cannot be packed into a fixed-width word key."""


class InvariantViolationError(LadderError):
    """A word store operation found the store in a state it does not allow."""


class DictionaryError(LadderError):
    """The dictionary file could not be opened or read."""
