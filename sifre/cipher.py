"""Numeric substitution cipher over the Turkish alphabet."""

import random

from .config import ALPHABET
from .utils import is_letter, normalize_for_display, normalize_for_identity


def generate_mapping(rng: random.Random) -> dict[str, int]:
    """Map each alphabet letter to a unique number in 1..29."""
    numbers = list(range(1, len(ALPHABET) + 1))
    rng.shuffle(numbers)
    return dict(zip(ALPHABET, numbers))


def invert_mapping(mapping: dict[str, int]) -> dict[int, str]:
    return {number: letter for letter, number in mapping.items()}


def _lookup(char: str, mapping: dict[str, int]) -> int | None:
    number = mapping.get(normalize_for_display(char))
    if number is None:
        number = mapping.get(normalize_for_identity(char))
    return number


def render_cipher(text: str, mapping: dict[str, int]) -> str:
    """Replace every letter with its number; spaces and punctuation pass through."""
    rendered = []
    for char in text:
        if not is_letter(char):
            rendered.append(char)
            continue
        number = _lookup(char, mapping)
        rendered.append(str(number) if number is not None else char)
    return ''.join(rendered)


def cipher_numbers(text: str, mapping: dict[str, int]) -> list[int | None]:
    """Cipher number for each LetterPosition, None for unmapped characters."""
    return [_lookup(char, mapping) for char in text if is_letter(char)]
