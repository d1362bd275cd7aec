from helpers.wordle.config import Language
from helpers.wordle.dictionary import dictionary_path, load_words
from helpers.wordle.marker import mark
from helpers.wordle.matcher import SortOrder, get_matches, unique_vowel_count
from helpers.wordle.record import GuessRecord, parse_guess_record


def test_no_records():
    words = list(load_words(dictionary_path(Language.EN)))
    assert get_matches([], words) == words


def test_get_matches():
    words = ["hoard", "adieu", "roads", "words", "chore", "close"]
    records = [parse_guess_record(",a,d/i/e/u")]
    assert get_matches(records, words) == ["hoard", "roads"]

    records.append(parse_guess_record("roads ,..,/"))
    assert get_matches(records, words) == ["hoard"]

    records.append(parse_guess_record("hoard ....."))
    records.append(parse_guess_record("chore ....."))
    assert get_matches(records, words) == []


def test_get_matches_keeps_target():
    words = list(load_words(dictionary_path(Language.EN)))
    for guess, target in [("adieu", "hoard"), ("crane", "crane"), ("speed", "steep"), ("llama", "alarm")]:
        record = GuessRecord(guess=guess, hint=mark(guess, target))
        assert target in get_matches([record], words)


def test_get_matches_skips_malformed_words():
    records = [parse_guess_record("adieu ,,///")]
    assert get_matches(records, ["hoa", "hoards", "hoard"]) == ["hoard"]


def test_sort_by_vowels():
    words = ["brick", "adieu", "ocean", "plank", "audio"]
    assert get_matches([], words, sort=SortOrder.VOWELS) == ["adieu", "audio", "ocean", "brick", "plank"]
    assert get_matches([], words, sort="vowels") == ["adieu", "audio", "ocean", "brick", "plank"]


def test_unknown_sort_keeps_order():
    words = ["brick", "adieu", "ocean"]
    assert get_matches([], words, sort="alphabetical") == words
    assert get_matches([], words, sort=None) == words


def test_unique_vowel_count():
    assert unique_vowel_count("queue") == 2
    assert unique_vowel_count("crwth") == 0
    assert unique_vowel_count("audio") == 4
