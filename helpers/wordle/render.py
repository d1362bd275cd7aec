import random

from rich.text import Text

from helpers.wordle.consts import EXACT_MATCH, LETTER_MATCH, NO_MATCH
from helpers.wordle.record import GuessRecord


TILE_STYLES = {
    EXACT_MATCH: "bold black on green",
    LETTER_MATCH: "bold black on yellow",
    NO_MATCH: "bold white on grey30",
}

GREETINGS = ["HELLO", "HOWDY", "HOLA!", "AHOY!"]
FAREWELLS = ["ADIEU", "ADIOS", "CIAO!", "LATER", "GBYE!"]

HELP_MESSAGE = """\
[bold underline red]BASIC USAGE[/]
Record a [italic magenta]GUESS_AND_MARKS[/] for each word you guess.
Use [cyan]suggest[/] or [cyan]suggest vowels[/] to see potential matches.

[bold underline red]GUESS_AND_MARKS[/]
A [italic magenta]GUESS_AND_MARKS[/] describes one line from the game board.
It is the word followed by its marks, or 5 pairs of <mark> + <letter>,
where <mark> is one of [green].[/], [yellow],[/] or [bright_black]/[/].

[green].[/] = letter is in the correct position (Green)
[yellow],[/] = letter is in the word but not in the correct position (Yellow)
[bright_black]/[/] = letter is not in the word (Gray)

For example, GAUNT marked yellow, green, gray, green, yellow can be entered as
  gaunt ,./.,
or
  ,g.a/u.n,t

[bold underline red]ALL COMMANDS[/]
[cyan]help[/] | [cyan]h[/]
  Print this help message.
[cyan]record[/] [italic magenta]GUESS_AND_MARKS[/]
  Record a guess you made and the game's marks on it.
  Shorthand: enter [italic magenta]GUESS_AND_MARKS[/] without a command.
[cyan]undo[/]
  Forget the last [italic magenta]GUESS_AND_MARKS[/] you recorded.
[cyan]suggest[/] | [cyan]s[/]
  List words from the dictionary that fit the guesses and marks you've entered so far.
[cyan]suggest vowels[/] | [cyan]sv[/]
  Same as [cyan]suggest[/], but prioritizes words containing a lot of vowels.
[cyan]lang[/] [italic magenta]en[/]|[italic magenta]es[/]
  Set the language of the game you're playing. English and Spanish are supported.
[cyan]show state[/] | [cyan]show[/]
  Print out the current language and the guesses and marks you've entered so far.
[cyan]reset[/] | [cyan]restart[/]
  Clear the guesses and marks you've entered.
[cyan]quit[/] | [cyan]exit[/] | [cyan]q[/]
  Exit the helper."""


def format_record(record: GuessRecord, color: bool = True) -> Text:
    if not color:
        return Text(f"{record.guess.upper()} {record.symbols}")

    text = Text()
    for letter, code in zip(record.guess.upper(), record.hint):
        text.append(letter, style=TILE_STYLES[code])
    return text


def wordlize(word: str, rng: random.Random, color: bool = True) -> Text:
    if not color:
        return Text(word.upper())

    text = Text()
    for letter in word.upper():
        text.append(letter, style=rng.choice(list(TILE_STYLES.values())))
    return text


def greeting(rng: random.Random) -> str:
    return rng.choice(GREETINGS)


def farewell(rng: random.Random) -> str:
    return rng.choice(FAREWELLS)


def result_summary(count: int) -> str:
    if count == 0:
        return "0 results :("
    if count == 1:
        return "1 result 🎉"
    return f"{count} results"
