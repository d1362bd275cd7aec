import collections

from helpers.wordle.consts import EXACT_MATCH, LETTER_MATCH, MARK_SYMBOLS, NO_MATCH


SYMBOL_MARKS = {symbol: code for code, symbol in MARK_SYMBOLS.items()}


def mark(guess: str, target: str) -> tuple[int, ...]:
    """Computes the marks the game gives `guess` when the secret word is `target`.

    Exact matches are assigned first and removed from consideration. The remaining
    target letters are then tracked as per-letter counts, so a letter repeated in
    the guess is marked as present at most as many times as it is still unclaimed in
    the target, leftmost guess occurrence first. Everything else is a miss.
    """
    if len(guess) != len(target):
        raise ValueError(f"Cannot mark {guess!r} against {target!r}: lengths differ")

    hint = [NO_MATCH] * len(guess)
    remaining = collections.Counter()
    for idx, (guessed_letter, target_letter) in enumerate(zip(guess, target)):
        if guessed_letter == target_letter:
            hint[idx] = EXACT_MATCH
        else:
            remaining[target_letter] += 1

    for idx, guessed_letter in enumerate(guess):
        if hint[idx] == EXACT_MATCH:
            continue

        if remaining[guessed_letter] > 0:
            remaining[guessed_letter] -= 1
            hint[idx] = LETTER_MATCH

    return tuple(hint)


def hint_to_symbols(hint: tuple[int, ...]) -> str:
    return "".join(MARK_SYMBOLS[code] for code in hint)


def symbols_to_hint(symbols: str) -> tuple[int, ...]:
    try:
        return tuple(SYMBOL_MARKS[symbol] for symbol in symbols)
    except KeyError as e:
        raise ValueError(f"Unknown mark symbol {e.args[0]!r} in {symbols!r}") from e
