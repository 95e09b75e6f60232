import pytest

from wordladder import main


@pytest.fixture
def dictionary(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(["cat", "bat", "bag", "cog", "cot", "dog", "qux", "doge"]) + "\n")
    return path


def test_prints_ladder(dictionary, capsys):
    assert main([str(dictionary), "cat", "dog"]) == 0
    out, err = capsys.readouterr()
    assert out == '["cat", "cot", "cog", "dog"]\n'
    assert err == ""


def test_prints_empty_ladder(dictionary, capsys):
    assert main([str(dictionary), "cat", "qux"]) == 0
    assert capsys.readouterr().out == "[]\n"
    assert main([str(dictionary), "foo", "dog"]) == 0
    assert capsys.readouterr().out == "[]\n"
    # Target of another length is never loaded
    assert main([str(dictionary), "dog", "doge"]) == 0
    assert capsys.readouterr().out == "[]\n"


def test_verbose(dictionary, capsys):
    assert main([str(dictionary), "foo", "dog", "--verbose"]) == 0
    out, err = capsys.readouterr()
    assert out == "[]\n"
    assert "Loaded 7 words of length 3" in err
    assert "Not in dictionary: foo" in err

    main([str(dictionary), "cat", "qux", "-v"])
    assert "No ladder exists between cat and qux" in capsys.readouterr().err


def test_missing_dictionary(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), "cat", "dog"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "Word list file not found" in err


def test_invalid_word(dictionary, capsys):
    assert main([str(dictionary), "abcdefghij", "dog"]) == 1
    assert "longer than 8" in capsys.readouterr().err


def test_missing_arguments(capsys):
    with pytest.raises(SystemExit):
        main([])
