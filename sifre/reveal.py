"""Initial reveal planning.

Each word gets a number of pre-revealed letters capped by its length
bucket. Easy rounds always use the full cap and prefer word edges and
common letters; medium and hard rounds withhold short words with
probability ``1 - reveal_probability`` and pick positions at random.
"""

import random

from .models import DifficultyConfig
from .utils import normalize_for_display, split_words, word_length_bucket, word_letters

SHORT_WORD_LENGTH = 4


def letters_to_reveal(length: int, tier: str, config: DifficultyConfig, rng: random.Random) -> int:
    """How many letters of a word of this length to reveal."""
    max_letters = config.limit_for(word_length_bucket(length))
    if tier == 'easy' or length > SHORT_WORD_LENGTH:
        return max_letters
    if rng.random() < config.reveal_probability:
        return min(1, max_letters)
    return 0


def priority_positions(letters: list[str], common_letters) -> list[int]:
    """Word edges first, then common letters, then the rest."""
    order = [0, len(letters) - 1]
    order += [i for i, letter in enumerate(letters) if normalize_for_display(letter) in common_letters]
    order += range(len(letters))
    return list(dict.fromkeys(order))


def choose_positions(letters: list[str], count: int, tier: str, rng: random.Random,
                     common_letters=frozenset(), use_edge_positions: bool = True) -> list[int]:
    """Pick count intra-word positions to reveal."""
    if count <= 0:
        return []
    if tier == 'easy' and use_edge_positions:
        ordered = priority_positions(letters, common_letters)
    else:
        ordered = list(range(len(letters)))
        rng.shuffle(ordered)
    return ordered[:count]


def plan_initial_reveals(text: str, tier: str, config: DifficultyConfig, rng: random.Random,
                         common_letters=frozenset(), use_edge_positions: bool = True) -> frozenset[int]:
    """Global LetterPositions revealed when the round starts.

    Positions are tracked per word occurrence, so a repeated word gets its
    own independent choice.
    """
    revealed = set()
    offset = 0
    for word in split_words(text):
        letters = word_letters(word)
        if not letters:
            continue
        count = letters_to_reveal(len(letters), tier, config, rng)
        for position in choose_positions(letters, count, tier, rng, common_letters, use_edge_positions):
            revealed.add(offset + position)
        offset += len(letters)
    return frozenset(revealed)
