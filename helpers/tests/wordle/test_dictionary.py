import re

import pytest

from helpers.wordle.config import Language
from helpers.wordle.consts import WORD_LENGTH
from helpers.wordle.dictionary import Dictionary, DictionaryError, dictionary_path, load_words


def test_load_words(tmp_path):
    path = tmp_path / "dictionary_en.txt"
    path.write_text("hoard\n  close \n\nchore\r\n", encoding="utf-8")
    assert list(load_words(path)) == ["hoard", "close", "chore"]


def test_load_words_missing(tmp_path):
    with pytest.raises(DictionaryError):
        list(load_words(tmp_path / "missing.txt"))


def test_dictionary_dir(tmp_path):
    (tmp_path / "dictionary_es.txt").write_text("otoño\nnieto\n", encoding="utf-8")
    dictionary = Dictionary(tmp_path)
    assert dictionary.path(Language.ES) == tmp_path / "dictionary_es.txt"
    assert list(dictionary.words(Language.ES)) == ["otoño", "nieto"]


@pytest.mark.parametrize("lang", list(Language))
def test_bundled_dictionaries(lang):
    words = list(load_words(dictionary_path(lang)))
    assert words
    assert len(set(words)) == len(words)
    for word in words:
        assert re.fullmatch(f"[a-zñ]{{{WORD_LENGTH}}}", word), word


def test_load_words_invalid_encoding(tmp_path):
    path = tmp_path / "dictionary_en.txt"
    path.write_bytes(b"hoard\n\xff\xfeabc\n")
    with pytest.raises(DictionaryError):
        list(load_words(path))


def test_load_words_normalizes(tmp_path):
    path = tmp_path / "dictionary_es.txt"
    path.write_text("oton\u0303o\nnieto\n", encoding="utf-8")
    assert list(load_words(path)) == ["otoño", "nieto"]
