import logging
import os
import unicodedata
from pathlib import Path
from typing import Iterator

from helpers.wordle.config import Language


logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY_DIR = Path(__file__).parent / "data"


class DictionaryError(OSError):
    pass


def dictionary_path(lang: Language, dictionary_dir: str | os.PathLike | None = None) -> Path:
    base_dir = Path(dictionary_dir) if dictionary_dir is not None else DEFAULT_DICTIONARY_DIR
    return base_dir / f"dictionary_{lang}.txt"


def load_words(path: str | os.PathLike) -> Iterator[str]:
    """Streams the words of a dictionary file, one per line, in file order."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = unicodedata.normalize("NFC", line.strip())
                if word:
                    yield word
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryError(f"Could not read dictionary {path}: {e}") from e


class Dictionary:
    def __init__(self, dictionary_dir: str | os.PathLike | None = None) -> None:
        self.dictionary_dir = dictionary_dir

    def path(self, lang: Language) -> Path:
        return dictionary_path(lang, self.dictionary_dir)

    def words(self, lang: Language) -> Iterator[str]:
        path = self.path(lang)
        logger.debug(f"Reading {lang} dictionary from {path}")
        return load_words(path)
