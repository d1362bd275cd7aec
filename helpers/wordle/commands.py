from dataclasses import dataclass
from typing import Union

from helpers.wordle.config import Language
from helpers.wordle.matcher import SortOrder
from helpers.wordle.record import is_guess_record


@dataclass(frozen=True)
class SetLanguage:
    lang: Language


@dataclass(frozen=True)
class Record:
    raw: str


@dataclass(frozen=True)
class Suggest:
    sort: SortOrder | None = None


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class ShowState:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Unrecognized:
    text: str


Command = Union[SetLanguage, Record, Suggest, Undo, ShowState, Reset, Help, Quit, Unrecognized]


KEYWORDS: dict[str, Command] = {
    "lang en": SetLanguage(Language.EN),
    "lang es": SetLanguage(Language.ES),
    "suggest": Suggest(),
    "s": Suggest(),
    "suggest vowels": Suggest(SortOrder.VOWELS),
    "sv": Suggest(SortOrder.VOWELS),
    "undo": Undo(),
    "show": ShowState(),
    "show state": ShowState(),
    "reset": Reset(),
    "restart": Reset(),
    "help": Help(),
    "h": Help(),
    "quit": Quit(),
    "exit": Quit(),
    "q": Quit(),
}

RECORD_PREFIX = "record "


def parse_command(text: str) -> Command:
    text = text.strip()

    if command := KEYWORDS.get(text):
        return command

    if text.startswith(RECORD_PREFIX):
        return Record(text[len(RECORD_PREFIX):])

    # A guess and its marks can be entered without the record keyword.
    if is_guess_record(text):
        return Record(text)

    return Unrecognized(text)
