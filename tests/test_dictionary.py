import os
import tempfile

import pytest

from ciphercraft.dictionary import bundled_word_list, load_word_list, parse_word_list
from ciphercraft.errors import ResourceUnavailable


def test_parse_strips_and_folds():
    words = parse_word_list("Foo\r\n\n  bar  \nBAZ\n\n")
    assert words == frozenset({"foo", "bar", "baz"})

def test_parse_empty():
    assert parse_word_list("") == frozenset()
    assert parse_word_list("\n \n\t\n") == frozenset()

def test_load_word_list():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "psw.txt")
        with open(path, "wb") as f:
            f.write(b"letmein\r\nQwerty\r\n")
        assert load_word_list(path) == frozenset({"letmein", "qwerty"})

def test_missing_file_raises():
    with tempfile.TemporaryDirectory() as td:
        with pytest.raises(ResourceUnavailable):
            load_word_list(os.path.join(td, "missing.txt"))

def test_undecodable_file_raises():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "bad.txt")
        with open(path, "wb") as f:
            f.write(b"\xff\xfe\xfa")
        try:
            load_word_list(path)
            ok = True
        except ResourceUnavailable as e:
            ok = False
            assert isinstance(e, OSError)
        assert not ok

def test_bundled_list():
    words = bundled_word_list()
    assert "password" in words
    assert all(w == w.strip().casefold() for w in words)

def test_bundled_list_missing_raises(monkeypatch):
    import ciphercraft.dictionary as dictionary

    monkeypatch.setattr(dictionary, "BUNDLED_WORD_LIST", "no-such-file.txt")
    with pytest.raises(ResourceUnavailable):
        bundled_word_list()
