import pytest

from wordladder.errors import WordEncodingError
from wordladder.word import Word


def test_encode_packs_bytes_most_significant_first():
    assert Word.from_str("cat").value == 0x636174
    assert Word.from_str("").value == 0


def test_decode_roundtrip():
    for s in ["", "a", "dog", "Zebra", "abcdefgh", "a-b c!"]:
        assert str(Word.from_str(s)) == s


def test_length_and_chars():
    assert len(Word.from_str("bath")) == 4
    assert len(Word.from_str("")) == 0
    assert Word.from_str("dog").chars() == b"dog"


def test_equality_and_hash():
    dog1 = Word.from_str("dog")
    dog2 = Word.from_str("dog")
    cat = Word.from_str("cat")
    assert dog1 == dog2
    assert hash(dog1) == hash(dog2)
    assert dog1 != cat
    assert len({dog1, dog2, cat}) == 2


def test_repr():
    assert repr(Word.from_str("dog")) == "Word('dog')"


def test_rejects_long_words():
    with pytest.raises(WordEncodingError):
        Word.from_str("abcdefghi")


def test_rejects_null_and_non_ascii():
    with pytest.raises(WordEncodingError):
        Word.from_str("a\0b")
    with pytest.raises(ValueError):
        Word.from_str("café")


def test_identical_words_are_not_adjacent():
    for s in ["dog", "a", "", "abcdefgh"]:
        w = Word.from_str(s)
        assert not w.is_adjacent(w)


def test_adjacent_by_last_letter():
    assert Word.from_str("dog").is_adjacent(Word.from_str("dot"))


def test_adjacent_by_any_single_letter():
    dog = Word.from_str("dog")
    assert dog.is_adjacent(Word.from_str("dig"))
    assert dog.is_adjacent(Word.from_str("fog"))
    assert Word.from_str("a").is_adjacent(Word.from_str("b"))


def test_not_adjacent_when_more_than_one_letter_differs():
    dog = Word.from_str("dog")
    assert not dog.is_adjacent(Word.from_str("dib"))
    assert not dog.is_adjacent(Word.from_str("got"))


def test_not_adjacent_when_lengths_differ():
    assert not Word.from_str("doge").is_adjacent(Word.from_str("dog"))
    assert not Word.from_str("bat").is_adjacent(Word.from_str("bath"))
    assert not Word.from_str("at").is_adjacent(Word.from_str("cat"))
    assert not Word.from_str("abc").is_adjacent(Word.from_str("xd"))


def test_adjacency_matches_letter_comparison():
    strings = ["cat", "cot", "cog", "dog", "bat", "bag", "at", "cats", "act", "tac", "ca"]
    for a in strings:
        for b in strings:
            expected = len(a) == len(b) and sum(x != y for x, y in zip(a, b)) == 1
            wa, wb = Word.from_str(a), Word.from_str(b)
            assert wa.is_adjacent(wb) == expected, (a, b)
            assert wa.is_adjacent(wb) == wb.is_adjacent(wa)
