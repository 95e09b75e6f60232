"""Module for loading dictionaries into word graphs."""

from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from wordladder.config import config as ladder_config
from wordladder.errors import DictionaryError, WordEncodingError
from wordladder.graph import WordGraph
from wordladder.word import Word


def load_word_list(path: str | PathLike, *, length: int | None = None) -> list[str]:
    """Load a word list, one word per line.

    Args:
        path: Path to the dictionary file.
        length: If given, keep only words of exactly this length.

    Returns:
        The words in file order, without duplicates.

    Raises:
        DictionaryError: If the file does not exist or cannot be read.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise DictionaryError(f"Word list file not found: {word_list_path}")

    words: dict[str, None] = {}
    try:
        with word_list_path.open("r", encoding="utf-8", errors="replace") as f:
            for line in f:
                word = line.rstrip("\r\n")
                if not word:
                    continue
                if length is not None and len(word) != length:
                    continue
                words[word] = None
    except OSError as e:
        raise DictionaryError(f"Could not read word list {word_list_path}: {e}") from e
    return list(words)


def encode_words(words: Iterable[str]) -> tuple[list[Word], list[str]]:
    """Encode strings into words.

    Strings longer than the configured maximum length, or that cannot be encoded,
    are set aside rather than aborting the load.

    Returns:
        A tuple `(encoded, rejected)`.
    """
    encoded: list[Word] = []
    rejected: list[str] = []
    for s in words:
        if len(s) > ladder_config.max_word_length:
            rejected.append(s)
            continue
        try:
            encoded.append(Word.from_str(s))
        except WordEncodingError:
            rejected.append(s)
    return encoded, rejected


def load_graph(
    path: str | PathLike,
    *,
    length: int | None = None,
    **kwargs: bool | None,
) -> tuple[WordGraph, list[str]]:
    """Load a dictionary file into a new `WordGraph`.

    Args:
        path: Path to the dictionary file.
        length: If given, load only words of exactly this length.
        **kwargs: Options passed on to `WordGraph`.

    Returns:
        A tuple `(graph, rejected)` where `rejected` lists the lines that could not
        be encoded.
    """
    encoded, rejected = encode_words(load_word_list(path, length=length))
    return WordGraph.from_words(encoded, **kwargs), rejected
