import re
import unicodedata
from dataclasses import dataclass

import more_itertools

from helpers.wordle.consts import MARK_SYMBOLS, WORD_LENGTH
from helpers.wordle.marker import hint_to_symbols, symbols_to_hint


_LETTER = "[a-zA-ZñÑ]"
_SYMBOL = "[" + re.escape("".join(MARK_SYMBOLS.values())) + "]"

# "adieu ,,///"
SEPARATED_PATTERN = re.compile(
    rf"^(?P<guess>{_LETTER}{{{WORD_LENGTH}}})\s+(?P<marks>{_SYMBOL}{{{WORD_LENGTH}}})$",
)
# ",a,d/i/e/u"
INTERLEAVED_PATTERN = re.compile(rf"^(?:{_SYMBOL}{_LETTER}){{{WORD_LENGTH}}}$")


class ParseError(ValueError):
    pass


@dataclass(frozen=True)
class GuessRecord:
    guess: str
    hint: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.guess) != WORD_LENGTH or len(self.hint) != WORD_LENGTH:
            raise ValueError(f"Guess and hint must both have {WORD_LENGTH} entries: {self.guess!r}, {self.hint!r}")
        if any(code not in MARK_SYMBOLS for code in self.hint):
            raise ValueError(f"Unknown mark code in {self.hint!r}")

    @property
    def symbols(self) -> str:
        return hint_to_symbols(self.hint)

    def __str__(self) -> str:
        return f"{self.guess} {self.symbols}"


def parse_guess_record(raw: str) -> GuessRecord:
    """Parses a guess and the game's marks on it.

    Two equivalent forms are accepted: the word followed by its marks
    ("adieu ,,///") or the marks interleaved before each letter (",a,d/i/e/u").
    Marks are "." (correct position), "," (wrong position) and "/" (not in word).
    """
    text = unicodedata.normalize("NFC", raw.strip())

    if match := SEPARATED_PATTERN.match(text):
        guess, symbols = match.group("guess"), match.group("marks")
    elif INTERLEAVED_PATTERN.match(text):
        pairs = list(more_itertools.sliced(text, 2))
        symbols = "".join(pair[0] for pair in pairs)
        guess = "".join(pair[1] for pair in pairs)
    else:
        raise ParseError(f"Invalid guess and marks: {raw!r}")

    return GuessRecord(guess=guess.lower(), hint=symbols_to_hint(symbols))


def is_guess_record(raw: str) -> bool:
    try:
        parse_guess_record(raw)
    except ParseError:
        return False
    return True
