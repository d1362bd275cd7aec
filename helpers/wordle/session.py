import logging
import random
from typing import Callable, Iterable

from rich.console import Console
from rich.text import Text

from helpers.wordle.commands import (
    Command,
    Help,
    Quit,
    Record,
    Reset,
    SetLanguage,
    ShowState,
    Suggest,
    Undo,
    Unrecognized,
    parse_command,
)
from helpers.wordle.config import HelperConfig, Language
from helpers.wordle.dictionary import Dictionary, DictionaryError
from helpers.wordle.matcher import SortOrder, get_matches
from helpers.wordle.record import GuessRecord, ParseError, parse_guess_record
from helpers.wordle.render import HELP_MESSAGE, farewell, format_record, greeting, result_summary, wordlize


logger = logging.getLogger(__name__)


class Session:
    """Guesses recorded so far and the language of the game being played."""

    lang: Language
    records: list[GuessRecord]

    def __init__(self, lang: Language = Language.EN) -> None:
        self.lang = lang
        # Most recent record last.
        self.records = []

    @property
    def history(self) -> list[GuessRecord]:
        return list(self.records)

    def set_language(self, lang: Language) -> None:
        self.lang = lang

    def record(self, raw: str) -> GuessRecord:
        record = parse_guess_record(raw)
        self.records.append(record)
        logger.debug(f"Recorded {record}, {len(self.records)} records in total")
        return record

    def undo(self) -> GuessRecord | None:
        if not self.records:
            return None

        record = self.records.pop()
        logger.debug(f"Removed {record}, {len(self.records)} records left")
        return record

    def reset(self) -> None:
        self.records = []

    def candidates(self, words: Iterable[str], sort: SortOrder | str | None = None) -> list[str]:
        return get_matches(self.records, words, sort=sort)


class Runner:
    def __init__(
        self,
        config: HelperConfig | None = None,
        console: Console | None = None,
        rng: random.Random | None = None,
        read_line: Callable[[str], str] | None = None,
    ) -> None:
        self.config = config or HelperConfig()
        self.console = console or Console()
        self.rng = rng or random.Random(self.config.seed)
        self.read_line = read_line or self.console.input
        self.dictionary = Dictionary(self.config.dictionary_dir)
        self.session = Session(lang=self.config.lang)

    def say(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def run(self) -> None:
        self.greet()

        running = True
        while running:
            try:
                line = self.read_line(self.config.prompt)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                running = self.execute(Quit())
                continue

            command = parse_command(line)
            logger.debug(f"Parsed {line!r} as {command}")

            self.console.print()
            running = self.execute(command)
            if running:
                self.console.print()

    def greet(self) -> None:
        self.console.print(wordlize(greeting(self.rng), self.rng, color=self.config.color))
        self.console.print()
        self.console.print("Enter a command ([cyan]h[/] for help)")

    def execute(self, command: Command) -> bool:
        """Applies one command to the session. Returns False once the helper should exit."""
        match command:
            case SetLanguage(lang=lang):
                self.session.set_language(lang)
                self.say("ok")

            case Record(raw=raw):
                try:
                    record = self.session.record(raw)
                except ParseError:
                    self.say("Invalid format")
                else:
                    self.console.print(Text.assemble("Recorded ", format_record(record, self.config.color)))

            case Suggest(sort=sort):
                self.suggest(sort)

            case Undo():
                record = self.session.undo()
                if record is None:
                    self.say("Nothing to undo")
                else:
                    self.console.print(Text.assemble("Removed ", format_record(record, self.config.color)))

            case ShowState():
                self.show_state()

            case Reset():
                self.session.reset()
                self.say("ok")

            case Help():
                self.console.print(HELP_MESSAGE)

            case Quit():
                self.console.print(wordlize(farewell(self.rng), self.rng, color=self.config.color))
                return False

            case Unrecognized():
                self.say("Command not recognized")

            case _:
                raise ValueError(f"Unknown command {command}")

        return True

    def suggest(self, sort: SortOrder | None) -> None:
        lang = self.session.lang
        try:
            matches = self.session.candidates(self.dictionary.words(lang), sort=sort)
        except DictionaryError as e:
            logger.error(f"Suggest failed: {e}")
            self.say(f"Could not read dictionary: {self.dictionary.path(lang)}")
            return

        if matches:
            self.say(", ".join(matches))
        self.say(result_summary(len(matches)))

    def show_state(self) -> None:
        self.say(f"Language: {self.session.lang.display_name}")
        self.say("Guesses and marks:")
        for idx, record in enumerate(self.session.history, start=1):
            self.console.print(Text.assemble(f"{idx}) ", format_record(record, self.config.color)))
