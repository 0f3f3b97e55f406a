"""Hint selection and commit."""

import logging
import random
from typing import Optional

from .config import HINT_EARLY_SENTENCE_LIMIT, HINT_PERFORMANCE_WINDOW, HINT_STRUGGLE_RATE
from .models import GameState, HintOutcome, ProgressiveGameState
from .utils import normalize_for_identity, word_spans

logger = logging.getLogger(__name__)

MSG_GAME_OVER = 'Oyun bitti!'
MSG_HINTS_EXHAUSTED = 'Tüm ipuçları kullanıldı!'
MSG_NOTHING_HIDDEN = 'Açılacak harf kalmadı!'


def decide_hint_strength(difficulty: str, progressive_state: Optional[ProgressiveGameState] = None) -> str:
    """Easy rounds get strong hints, hard rounds weak ones.

    Medium rounds get strong hints while the player is early in the
    session or has lost most of their recent rounds.
    """
    if difficulty == 'easy':
        return 'strong'
    if difficulty == 'hard' or progressive_state is None:
        return 'weak'

    history = progressive_state.performance_history
    if len(history) >= HINT_PERFORMANCE_WINDOW:
        recent = history[-HINT_PERFORMANCE_WINDOW:]
        win_rate = sum(1 for r in recent if r.is_won) / len(recent)
        if win_rate < HINT_STRUGGLE_RATE:
            return 'strong'
    if progressive_state.current_sentence_number <= HINT_EARLY_SENTENCE_LIMIT:
        return 'strong'
    return 'weak'


def hidden_positions_by_word(state: GameState) -> list[list[int]]:
    """Still-hidden global positions of each word, skipping fully revealed words."""
    revealed = state.revealed_positions
    words = []
    for start, length in word_spans(state.original_sentence):
        hidden = [pos for pos in range(start, start + length) if pos not in revealed]
        if hidden:
            words.append(hidden)
    return words


def use_hint(state: GameState, progressive_state: Optional[ProgressiveGameState],
             rng: random.Random) -> HintOutcome:
    """Choose positions to reveal. Does not change the state; see apply_hint."""
    if state.is_game_over:
        return HintOutcome(success=False, reason='game_over', message=MSG_GAME_OVER)
    if state.hints_used >= state.max_hints:
        return HintOutcome(success=False, reason='hints_exhausted', message=MSG_HINTS_EXHAUSTED)

    words = hidden_positions_by_word(state)
    if not words:
        return HintOutcome(success=False, reason='no_hidden_letters', message=MSG_NOTHING_HIDDEN)

    anchor = rng.choice(rng.choice(words))
    letters = state.letters
    letter = letters[anchor]
    strength = decide_hint_strength(state.difficulty, progressive_state)

    if strength == 'strong':
        # Folded identity: S also uncovers Ş, I also uncovers İ
        revealed = state.revealed_positions
        identities = [normalize_for_identity(other) for other in letters]
        positions = tuple(
            pos for pos, identity in enumerate(identities)
            if identity == identities[anchor] and pos not in revealed
        )
    else:
        positions = (anchor,)

    return HintOutcome(
        success=True,
        revealed_positions=positions,
        strength=strength,
        letter=letter,
        is_game_completed=state.is_complete_with(positions),
    )


def apply_hint(state: GameState, outcome: HintOutcome) -> GameState:
    """Commit a successful hint: reveal its positions and count it."""
    if not outcome.success or state.is_game_over or state.hints_used >= state.max_hints:
        return state
    user_revealed = state.user_revealed_positions | set(outcome.revealed_positions)
    won = state.is_complete_with(user_revealed)
    logger.info(
        f"Hint {state.hints_used + 1}/{state.max_hints} ({outcome.strength}) "
        f"revealed {len(outcome.revealed_positions)} position(s)"
    )
    return state.model_copy(update={
        'user_revealed_positions': user_revealed,
        'hints_used': state.hints_used + 1,
        'is_won': won,
        'is_game_over': won,
    })
