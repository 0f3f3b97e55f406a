"""Sentence selection policy."""

import logging
import random

from .config import ALPHABET, LETTER_RUN_LIMIT, TIERS
from .interfaces import SentenceCorpus
from .models import Sentence
from .utils import normalize_for_display, sentence_letters

logger = logging.getLogger(__name__)


def has_letter_run(text: str, run_length: int = LETTER_RUN_LIMIT) -> bool:
    """True if the text has run_length identical consecutive letters, ignoring case."""
    run = 0
    previous = None
    for char in normalize_for_display(text):
        if char.isspace():
            run = 0
            previous = None
            continue
        run = run + 1 if char == previous else 1
        previous = char
        if run >= run_length and char.isalpha():
            return True
    return False


def pick_sentence(corpus: SentenceCorpus, tier: str, rng: random.Random) -> Sentence:
    """Pick a random sentence of the tier, preferring ones without letter runs."""
    candidates = corpus.sentences_by_difficulty(tier)
    if not candidates:
        raise ValueError(f"No sentences for difficulty '{tier}'")
    good = [s for s in candidates if not has_letter_run(s.text)]
    return rng.choice(good or candidates)


def validate_corpus(corpus: SentenceCorpus) -> None:
    """Check the corpus once at startup. Raises ValueError for an empty tier."""
    categories = corpus.categories()
    counts = {tier: 0 for tier in TIERS}
    for entry in corpus.entries():
        counts[entry.difficulty] += 1
        if entry.category not in categories:
            logger.warning(f"Sentence {entry.id} has unknown category '{entry.category}'")
        stray = sorted({c for c in sentence_letters(entry.text) if c not in ALPHABET})
        if stray:
            logger.warning(f"Sentence {entry.id} has letters outside the alphabet: {stray}")
    empty = [tier for tier, count in counts.items() if count == 0]
    if empty:
        raise ValueError(f"Corpus has no sentences for difficulty: {', '.join(empty)}")
    logger.info(f"Corpus loaded: {counts}")
