"""Round state transitions."""

import logging
import math
import random

from .cipher import generate_mapping, render_cipher
from .models import DifficultyConfig, GameMechanics, GameResult, GameState, Sentence
from .reveal import plan_initial_reveals
from .utils import normalize_for_display

logger = logging.getLogger(__name__)


def new_game_state(sentence: Sentence, config: DifficultyConfig, rng: random.Random,
                   now: float, mechanics: GameMechanics = GameMechanics()) -> GameState:
    """Build the initial state of a round: fresh mapping, then initial reveals."""
    mapping = generate_mapping(rng)
    initial = plan_initial_reveals(
        sentence.text, sentence.difficulty, config, rng,
        common_letters=mechanics.common_letters,
        use_edge_positions=mechanics.easy_use_edge_positions,
    )
    return GameState(
        original_sentence=sentence.text,
        cipher_sentence=render_cipher(sentence.text, mapping),
        letter_mapping=mapping,
        initial_revealed_positions=initial,
        max_hints=config.max_hints,
        start_time=now,
        time_limit=config.time_limit_seconds,
        difficulty=sentence.difficulty,
        category=sentence.category,
    )


def submit_guess(state: GameState, letter: str, position: int) -> tuple[bool, GameState]:
    """Guess which letter sits at position. Returns (accepted, new_state).

    Terminal rounds, out-of-range positions and malformed letters are
    rejected without any change. Callers must not submit an already
    revealed position.
    """
    if state.is_game_over:
        return False, state
    letters = state.letters
    if isinstance(position, bool) or not isinstance(position, int):
        return False, state
    if not 0 <= position < len(letters):
        return False, state
    guess = normalize_for_display(letter.strip()) if letter else ''
    if len(guess) != 1:
        return False, state

    if letters[position] == guess:
        user_revealed = state.user_revealed_positions | {position}
        won = state.is_complete_with(user_revealed)
        return True, state.model_copy(update={
            'user_revealed_positions': user_revealed,
            'is_won': won,
            'is_game_over': won,
        })

    mistakes = state.mistakes + 1
    lost = mistakes >= state.max_mistakes
    return False, state.model_copy(update={
        'mistakes': mistakes,
        'is_game_over': lost,
        'is_won': False,
    })


def elapsed_seconds(state: GameState, now: float) -> int:
    return max(0, math.floor(now - state.start_time))


def remaining_time(state: GameState, now: float) -> int:
    """Seconds left on the clock. Meaningless when time_limit is 0 (untimed)."""
    return max(0, state.time_limit - elapsed_seconds(state, now))


def is_time_up(state: GameState, now: float) -> bool:
    return state.time_limit > 0 and remaining_time(state, now) == 0


def expire_round(state: GameState, now: float) -> GameState:
    """Mark a timed round lost once its clock has run out.

    Meant for the external timer poller; the round itself never ticks.
    """
    if state.is_game_over or not is_time_up(state, now):
        return state
    logger.info(f"Round timed out after {state.time_limit}s")
    return state.model_copy(update={'is_game_over': True, 'is_won': False})


def build_result(state: GameState, sentence_number: int, now: float) -> GameResult:
    """Summarize a finished round for the session history."""
    return GameResult(
        sentence_number=sentence_number,
        difficulty=state.difficulty,
        is_won=state.is_won,
        mistakes=state.mistakes,
        hints_used=state.hints_used,
        time_spent_seconds=elapsed_seconds(state, now),
    )
