WORD_LENGTH = 5

NO_MATCH = 0
LETTER_MATCH = 1
EXACT_MATCH = 2

# Surface syntax used when entering and displaying marks.
MARK_SYMBOLS = {
    EXACT_MATCH: ".",
    LETTER_MATCH: ",",
    NO_MATCH: "/",
}

VOWELS = frozenset("aeiou")
