import enum
import logging
from typing import Iterable

from helpers.wordle.consts import VOWELS
from helpers.wordle.marker import mark
from helpers.wordle.record import GuessRecord


logger = logging.getLogger(__name__)


class SortOrder(enum.StrEnum):
    VOWELS = "vowels"


def unique_vowel_count(word: str) -> int:
    return len(VOWELS.intersection(word))


def is_candidate(word: str, records: Iterable[GuessRecord]) -> bool:
    """A word is a candidate if, as the secret, it would have produced every recorded hint."""
    return all(
        len(word) == len(record.guess) and mark(record.guess, word) == record.hint
        for record in records
    )


def get_matches(
    records: Iterable[GuessRecord],
    words: Iterable[str],
    sort: SortOrder | str | None = None,
) -> list[str]:
    """Returns the words consistent with all the records, in their original order.

    With sort=SortOrder.VOWELS, words with more distinct vowels come first; ties keep
    their original order. Any other sort value leaves the order untouched.
    """
    records = list(records)
    matches = [word for word in words if is_candidate(word, records)]

    if sort == SortOrder.VOWELS:
        matches.sort(key=unique_vowel_count, reverse=True)
    elif sort is not None:
        logger.debug(f"Ignoring unknown sort order {sort!r}")

    logger.debug(f"Found {len(matches)} matches for {len(records)} records")
    return matches
