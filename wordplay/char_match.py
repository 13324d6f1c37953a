from dataclasses import dataclass

from wordplay.normalized_word import Letter, letter_from_char

WILDCARDS = " .?"


@dataclass(frozen=True)
class Only:
    letter: Letter

    def matches(self, letter: Letter):
        return letter == self.letter


@dataclass(frozen=True)
class AnyLetter:
    def matches(self, letter: Letter):
        return True


ANY = AnyLetter()

type CharMatch = Only | AnyLetter


def char_match_from_char(ch: str) -> CharMatch:
    """Parse one pattern character: a letter, or one of the wildcards " .?"."""
    if ch in WILDCARDS:
        return ANY
    letter = letter_from_char(ch)
    if letter is None:
        raise ValueError(f"Unknown search char: {ch!r}")
    return Only(letter)
