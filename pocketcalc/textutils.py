"""Character classification, case toggling and character patterns."""

from __future__ import annotations

import enum
import string
from typing import Callable

from pocketcalc.console import Console


class CharacterKind(enum.Enum):
    VOWEL = "vowel"
    CONSONANT = "consonant"
    DIGIT = "digit"
    SPECIAL = "special character"


_VOWELS = frozenset("aeiou")
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_TOGGLE = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)


def _single(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def classify_character(char: str) -> CharacterKind:
    """Classify an ASCII character as vowel, consonant, digit or special."""
    _single(char)
    if char in _LETTERS:
        return CharacterKind.VOWEL if char.lower() in _VOWELS else CharacterKind.CONSONANT
    if char in _DIGITS:
        return CharacterKind.DIGIT
    return CharacterKind.SPECIAL


def toggle_case(text: str) -> str:
    """Swap the case of ASCII letters, leaving everything else alone."""
    return text.translate(_TOGGLE)


_MISMATCH = {
    "digit": "Error: You said digit, but entered something else.",
    "alphabet": "Error: You said alphabet, but entered something else.",
    "special": "Error: You said special character, but entered a digit or alphabet.",
}
_INVALID_KIND = (
    "Invalid input type. Please enter either 'special', 'digit', or 'alphabet'."
)


def validate_character(kind: str, char: str) -> str:
    """Check that ``char`` is of the stated kind ("special", "digit" or "alphabet")."""
    if kind not in _MISMATCH:
        raise ValueError(_INVALID_KIND)
    _single(char)
    is_letter = char in _LETTERS
    is_digit = char in _DIGITS
    valid = {
        "digit": is_digit,
        "alphabet": is_letter,
        "special": not (is_letter or is_digit),
    }[kind]
    if not valid:
        raise ValueError(_MISMATCH[kind])
    return char


def rectangle_pattern(rows: int, cols: int, char: str) -> str:
    """A block of ``rows`` lines, each with ``cols`` copies of ``char``."""
    line = f"{char} " * max(cols, 0) + "\n"
    return line * max(rows, 0)


def triangle_pattern(rows: int, char: str) -> str:
    """Lines growing from one to ``rows`` copies of ``char``."""
    return "".join(f"{char} " * count + "\n" for count in range(1, rows + 1))


def _character(console: Console) -> int:
    char = console.read_char("Enter a single character: ")
    console.write(f"'{char}' is a {classify_character(char).value}.\n")
    return 0


def _toggle(console: Console) -> int:
    text = console.read_line("Enter a string: ")
    console.write(f"Toggled case string: {toggle_case(text)}\n\n")
    return 0


def _pattern(console: Console) -> int:
    kind = console.read_word("Do you want to print a special character, alphabet, or digit? ")
    if kind not in _MISMATCH:
        console.write(_INVALID_KIND + "\n")
        return 1
    char = console.read_char("Enter the character you want to print: ")
    try:
        validate_character(kind, char)
    except ValueError as exc:
        console.write(f"{exc}\n")
        return 1
    rows = console.read_int("Enter number of rows: ")
    cols = console.read_int("Enter number of columns: ")
    shape = console.read_word("Choose pattern type (rectangle / triangular): ")
    console.write("\n--- Output Pattern ---\n")
    if shape == "rectangle":
        console.write(rectangle_pattern(rows, cols, char))
    elif shape == "triangular":
        console.write(triangle_pattern(rows, char))
    else:
        console.write("Invalid pattern type.\n")
    return 0


_PROGRAMS: dict[str, Callable[[Console], int]] = {
    "character": _character,
    "toggle-case": _toggle,
    "pattern": _pattern,
}


def run(program: str, console: Console) -> int:
    """Run the named program and return its exit status."""
    try:
        handler = _PROGRAMS[program]
    except KeyError:
        raise ValueError(f"unknown program: {program!r}") from None
    return handler(console)