"""Round and session orchestration over an injected corpus, settings, rng and clock."""

import logging
import random
import time
from typing import Callable, Optional

from .corpus import pick_sentence, validate_corpus
from .file_storage import FileStorage
from .game import build_result, expire_round, new_game_state, remaining_time, submit_guess
from .hints import apply_hint, use_hint
from .interfaces import SentenceCorpus
from .models import GameResult, GameSettings, GameState, HintOutcome, ProgressiveGameState, Sentence
from .progression import record_result, start_session

logger = logging.getLogger(__name__)


class GameEngine:
    """Entry point for a presentation layer.

    Every method returns new state objects; callers keep whichever
    GameState and ProgressiveGameState are current.
    """

    def __init__(self, corpus: SentenceCorpus = None, settings: GameSettings = None,
                 rng: random.Random = None, clock: Callable[[], float] = time.time):
        if corpus is None or settings is None:
            storage = FileStorage()
            corpus = corpus or storage
            settings = settings or storage.load_settings()
        self.corpus = corpus
        self.settings = settings
        self.rng = rng or random.Random()
        self.clock = clock
        validate_corpus(self.corpus)

    # Rounds

    def start_round(self, tier: str) -> GameState:
        return self.start_custom_round(pick_sentence(self.corpus, tier, self.rng))

    def start_custom_round(self, sentence: Sentence) -> GameState:
        state = new_game_state(
            sentence,
            self.settings.for_tier(sentence.difficulty),
            self.rng,
            self.clock(),
            self.settings.mechanics,
        )
        logger.info(
            f"Round started: {sentence.difficulty}, {state.total_letters} letters, "
            f"{len(state.initial_revealed_positions)} pre-revealed"
        )
        return state

    def start_custom_round_by_id(self, sentence_id: int) -> Optional[GameState]:
        sentence = self.corpus.get_sentence_by_id(sentence_id)
        if sentence is None:
            logger.info(f"Unknown sentence id {sentence_id}")
            return None
        return self.start_custom_round(sentence)

    def submit_guess(self, state: GameState, letter: str, position: int) -> tuple[bool, GameState]:
        accepted, new_state = submit_guess(state, letter, position)
        if new_state.is_game_over and not state.is_game_over:
            logger.info(f"Round {new_state.status} with {new_state.mistakes} mistake(s)")
        return accepted, new_state

    def request_hint(self, state: GameState,
                     progressive_state: ProgressiveGameState = None) -> tuple[HintOutcome, GameState]:
        outcome = use_hint(state, progressive_state, self.rng)
        return outcome, apply_hint(state, outcome)

    def remaining_time(self, state: GameState) -> int:
        return remaining_time(state, self.clock())

    def expire_round(self, state: GameState) -> GameState:
        return expire_round(state, self.clock())

    # Session

    def start_session(self) -> ProgressiveGameState:
        return start_session()

    def next_sentence_for(self, progressive_state: ProgressiveGameState) -> Sentence:
        return pick_sentence(self.corpus, progressive_state.current_difficulty, self.rng)

    def start_next_round(self, progressive_state: ProgressiveGameState) -> GameState:
        return self.start_custom_round(self.next_sentence_for(progressive_state))

    def record_result(self, progressive_state: ProgressiveGameState,
                      result: GameResult) -> ProgressiveGameState:
        return record_result(progressive_state, result, self.rng)

    def finish_round(self, state: GameState,
                     progressive_state: ProgressiveGameState) -> ProgressiveGameState:
        """Record a finished round and advance the session."""
        if not state.is_game_over:
            raise ValueError("Round is still active")
        result = build_result(state, progressive_state.current_sentence_number, self.clock())
        return self.record_result(progressive_state, result)
