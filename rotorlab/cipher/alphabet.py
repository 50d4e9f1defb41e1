from __future__ import annotations

import string

ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)
LITTLE_A = ord("a")

# Symbols that bypass the rotors untouched.
PASSTHROUGH = frozenset(" \n")


def is_letter(ch: str) -> bool:
    return len(ch) == 1 and "a" <= ch <= "z"


def letter_to_index(ch: str) -> int:
    if not is_letter(ch):
        raise ValueError(f"Not a lowercase letter: {ch!r}")
    return ord(ch) - LITTLE_A


def index_to_letter(index: int) -> str:
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"Letter index out of range: {index}")
    return chr(LITTLE_A + index)


def translate_letter(index: int, shift: int) -> str:
    """Letter at `index + 'a' + shift`; the shift must keep it inside a-z."""
    return index_to_letter(index + shift)
