"""Shared fakes for the test suite."""

import random

from sifre.interfaces import SentenceCorpus
from sifre.models import Category, CorpusEntry, DifficultyConfig, GameMechanics, GameSettings

EASY_LIMITS = {'<=4': 1, '5-6': 2, '7-8': 3, '9': 3, '10-12': 4, '12+': 5}
MEDIUM_LIMITS = {'<=4': 1, '5-6': 1, '7-8': 2, '9': 2, '10-12': 3, '12+': 3}
HARD_LIMITS = {'<=4': 1, '5-6': 1, '7-8': 1, '9': 1, '10-12': 2, '12+': 2}


class ScriptedRandom(random.Random):
    """Deterministic random source.

    random() returns queued values (0.0 once exhausted), choice() takes the
    first element and shuffle() leaves the order untouched.
    """

    def __init__(self, values=()):
        super().__init__(0)
        self.values = list(values)

    def random(self):
        if self.values:
            return self.values.pop(0)
        return 0.0

    def choice(self, seq):
        return seq[0]

    def shuffle(self, x):
        pass


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class MockCorpus(SentenceCorpus):
    """In-memory corpus for testing."""

    def __init__(self, sentences: list[tuple[str, str, str]] = None, categories: dict = None):
        sentences = sentences if sentences is not None else [
            ('Kedi uyuyor', 'easy', 'gunluk'),
            ('Ağaç yaşken eğilir.', 'medium', 'atasozu'),
            ('Sakla samanı, gelir zamanı.', 'hard', 'atasozu'),
        ]
        self._entries = [
            CorpusEntry(id=i + 1, text=text, difficulty=difficulty, category=category)
            for i, (text, difficulty, category) in enumerate(sentences)
        ]
        self._categories = categories if categories is not None else {
            'gunluk': Category(name='Günlük Hayat', color='#3b82f6'),
            'atasozu': Category(name='Atasözleri', color='#f59e0b'),
        }

    def entries(self):
        return iter(self._entries)

    def categories(self):
        return dict(self._categories)


def make_config(limits=None, probability: float = 1.0, max_hints: int = 3,
                time_limit: int = 0) -> DifficultyConfig:
    return DifficultyConfig(
        time_limit_seconds=time_limit,
        max_hints=max_hints,
        reveal_probability=probability,
        letter_reveal_limits=limits or EASY_LIMITS,
    )


def make_settings() -> GameSettings:
    return GameSettings(
        difficulty={
            'easy': make_config(EASY_LIMITS, 1.0, 5, 0),
            'medium': make_config(MEDIUM_LIMITS, 0.5, 3, 300),
            'hard': make_config(HARD_LIMITS, 0.25, 2, 600),
        },
        mechanics=GameMechanics(),
    )
