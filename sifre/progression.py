"""Progressive difficulty across a session."""

import logging
import random
from typing import Sequence

from .config import DEFAULT_TIER, DIFFICULTY_BANDS, PROGRESS_WINDOW_SIZE
from .models import GameResult, ProgressiveGameState

logger = logging.getLogger(__name__)


def start_session() -> ProgressiveGameState:
    return ProgressiveGameState(current_sentence_number=1, current_difficulty=DEFAULT_TIER)


def recent_results(results: Sequence[GameResult]) -> list[GameResult]:
    """The last PROGRESS_WINDOW_SIZE results (fewer early on)."""
    return list(results[-PROGRESS_WINDOW_SIZE:])


def summarize_performance(results: Sequence[GameResult]) -> dict:
    """Success rate and average mistakes over the recent window."""
    window = recent_results(results)
    if not window:
        return {'games': 0, 'success_rate': 0.0, 'average_mistakes': 0.0}
    return {
        'games': len(window),
        'success_rate': sum(1 for r in window if r.is_won) / len(window),
        'average_mistakes': sum(r.mistakes for r in window) / len(window),
    }


def next_difficulty(sentence_number: int, results: Sequence[GameResult], rng: random.Random) -> str:
    """Pick the tier for a round from the sentence-number band.

    Recent performance does not shift the odds yet; only the band does.
    """
    if not recent_results(results):
        return DEFAULT_TIER
    roll = rng.random()
    for last_in_band, easy_below, medium_below in DIFFICULTY_BANDS:
        if last_in_band is None or sentence_number <= last_in_band:
            if roll < easy_below:
                return 'easy'
            if roll < medium_below:
                return 'medium'
            return 'hard'
    return DEFAULT_TIER


def record_result(progressive_state: ProgressiveGameState, result: GameResult,
                  rng: random.Random) -> ProgressiveGameState:
    """Append a result and compute the tier of the next round."""
    history = progressive_state.performance_history + (result,)
    number = progressive_state.current_sentence_number + 1
    difficulty = next_difficulty(number, history, rng)
    summary = summarize_performance(history)
    logger.info(
        f"Sentence {result.sentence_number} {'won' if result.is_won else 'lost'}; "
        f"recent success {summary['success_rate']:.0%}, "
        f"avg mistakes {summary['average_mistakes']:.1f}; next tier {difficulty}"
    )
    return ProgressiveGameState(
        current_sentence_number=number,
        performance_history=history,
        current_difficulty=difficulty,
    )
