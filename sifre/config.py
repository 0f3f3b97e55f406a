"""Configuration constants for the cipher puzzle."""

import os

# Turkish alphabet in cipher order
ALPHABET = 'ABCÇDEFGĞHIİJKLMNOÖPRSŞTUÜVYZ'

# Characters that are never cipher letters
PUNCTUATION = " '.,!?:;-"

TIERS = ('easy', 'medium', 'hard')
DEFAULT_TIER = 'easy'

MAX_MISTAKES = 3

# Sentence quality filter
LETTER_RUN_LIMIT = 3          # Runs of this many identical letters are avoided

# Hint strength (medium tier)
HINT_PERFORMANCE_WINDOW = 3   # Recent results considered
HINT_STRUGGLE_RATE = 0.5      # Win rate below this gets strong hints
HINT_EARLY_SENTENCE_LIMIT = 10

# Progressive difficulty
PROGRESS_WINDOW_SIZE = 5      # Number of recent results to consider

# (last sentence number of band, cumulative easy, cumulative medium)
DIFFICULTY_BANDS = (
    (5, 0.7, 1.0),
    (15, 0.5, 0.9),
    (30, 0.3, 0.8),
    (None, 0.2, 0.6),
)

# Word length bucket -> (min length, max length)
WORD_LENGTH_BUCKETS = {
    '<=4': (1, 4),
    '5-6': (5, 6),
    '7-8': (7, 8),
    '9': (9, 9),
    '10-12': (10, 12),
    '12+': (13, None),
}

MAX_TIME_LIMIT = 3599         # MM:SS display has no hour rollover

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')
SENTENCES_FILE = os.path.join(DATA_DIR, 'sentences.json')
SETTINGS_FILE = os.path.join(DATA_DIR, 'game_settings.json')
