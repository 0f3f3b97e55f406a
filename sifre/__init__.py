from .models import (
    Sentence, CorpusEntry, Category, DifficultyConfig, GameMechanics, GameSettings,
    GameState, GameResult, ProgressiveGameState, HintOutcome
)
from .interfaces import SentenceCorpus, SettingsSource
from .utils import normalize_for_identity, normalize_for_display, format_as_clock
from .cipher import generate_mapping, render_cipher, invert_mapping, cipher_numbers
from .corpus import pick_sentence, has_letter_run, validate_corpus
from .reveal import plan_initial_reveals
from .game import submit_guess, remaining_time, expire_round, build_result
from .hints import use_hint, apply_hint, decide_hint_strength
from .progression import start_session, next_difficulty, record_result, summarize_performance
from .file_storage import FileStorage
from .engine import GameEngine
from .config import ALPHABET, MAX_MISTAKES, TIERS

__all__ = [
    'Sentence', 'CorpusEntry', 'Category', 'DifficultyConfig', 'GameMechanics', 'GameSettings',
    'GameState', 'GameResult', 'ProgressiveGameState', 'HintOutcome',
    'SentenceCorpus', 'SettingsSource',
    'normalize_for_identity', 'normalize_for_display', 'format_as_clock',
    'generate_mapping', 'render_cipher', 'invert_mapping', 'cipher_numbers',
    'pick_sentence', 'has_letter_run', 'validate_corpus',
    'plan_initial_reveals',
    'submit_guess', 'remaining_time', 'expire_round', 'build_result',
    'use_hint', 'apply_hint', 'decide_hint_strength',
    'start_session', 'next_difficulty', 'record_result', 'summarize_performance',
    'FileStorage', 'GameEngine',
    'ALPHABET', 'MAX_MISTAKES', 'TIERS'
]
