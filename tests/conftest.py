import pytest

from wordladder.graph import WordGraph
from wordladder.word import Word

DICTIONARY = ["cat", "cat", "bat", "bag", "cog", "cot", "dog"]


def words(*strings: str) -> list[Word]:
    return [Word.from_str(s) for s in strings]


def is_ladder(ladder: list[Word]) -> bool:
    return all(a.is_adjacent(b) for a, b in zip(ladder, ladder[1:]))


@pytest.fixture(params=[False, True], ids=["scan", "index"])
def use_pattern_index(request) -> bool:
    return request.param


@pytest.fixture
def graph(use_pattern_index) -> WordGraph:
    return WordGraph.from_words(words(*DICTIONARY), use_pattern_index=use_pattern_index)
