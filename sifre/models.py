"""Domain models for the cipher puzzle."""

from types import MappingProxyType
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from .config import ALPHABET, MAX_MISTAKES, MAX_TIME_LIMIT, TIERS, WORD_LENGTH_BUCKETS
from .utils import sentence_letters

Tier = Literal['easy', 'medium', 'hard']
HintStrength = Literal['strong', 'weak']


class Sentence(BaseModel):
    """A corpus sentence the round is built from."""
    model_config = ConfigDict(frozen=True)

    text: str
    difficulty: Tier
    category: str = 'general'

    @field_validator('text')
    @classmethod
    def _text_has_letters(cls, value: str) -> str:
        if not sentence_letters(value):
            raise ValueError('sentence must contain at least one letter')
        return value


class CorpusEntry(Sentence):
    id: int

    def to_sentence(self) -> Sentence:
        return Sentence(text=self.text, difficulty=self.difficulty, category=self.category)


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    color: str = '#888888'


class DifficultyConfig(BaseModel):
    """Per-tier round settings."""
    model_config = ConfigDict(frozen=True)

    time_limit_seconds: int = Field(ge=0, le=MAX_TIME_LIMIT)  # 0 means untimed
    max_hints: int = Field(ge=0)
    reveal_probability: float = Field(ge=0.0, le=1.0)
    letter_reveal_limits: dict[str, int]

    @field_validator('letter_reveal_limits')
    @classmethod
    def _check_limits(cls, limits: dict[str, int]) -> dict[str, int]:
        missing = set(WORD_LENGTH_BUCKETS) - set(limits)
        if missing:
            raise ValueError(f"missing word length buckets: {sorted(missing)}")
        unknown = set(limits) - set(WORD_LENGTH_BUCKETS)
        if unknown:
            raise ValueError(f"unknown word length buckets: {sorted(unknown)}")
        for bucket, limit in limits.items():
            min_length = WORD_LENGTH_BUCKETS[bucket][0]
            if limit < 0 or limit > min_length:
                raise ValueError(
                    f"limit for bucket {bucket!r} must be between 0 and {min_length}, got {limit}"
                )
        return limits

    def limit_for(self, bucket: str) -> int:
        return self.letter_reveal_limits[bucket]


class GameMechanics(BaseModel):
    model_config = ConfigDict(frozen=True)

    common_letters: frozenset[str] = frozenset('EAİNRLTOUKMYSD')
    easy_use_edge_positions: bool = True

    @field_validator('common_letters')
    @classmethod
    def _letters_in_alphabet(cls, letters: frozenset[str]) -> frozenset[str]:
        stray = [letter for letter in letters if letter not in ALPHABET]
        if stray:
            raise ValueError(f"common letters outside the alphabet: {sorted(stray)}")
        return letters


class GameSettings(BaseModel):
    """Difficulty table plus mechanics, loaded once per process."""
    model_config = ConfigDict(frozen=True)

    difficulty: dict[Tier, DifficultyConfig]
    mechanics: GameMechanics = GameMechanics()

    @model_validator(mode='after')
    def _all_tiers(self) -> 'GameSettings':
        missing = [tier for tier in TIERS if tier not in self.difficulty]
        if missing:
            raise ValueError(f"missing difficulty tiers: {missing}")
        return self

    def for_tier(self, tier: str) -> DifficultyConfig:
        return self.difficulty[tier]


class GameState(BaseModel):
    """One round. Transitions return a new instance; nothing mutates in place."""
    model_config = ConfigDict(frozen=True)

    original_sentence: str
    cipher_sentence: str
    letter_mapping: Mapping[str, int]
    initial_revealed_positions: frozenset[int] = frozenset()
    user_revealed_positions: frozenset[int] = frozenset()
    mistakes: int = 0
    max_mistakes: int = MAX_MISTAKES
    hints_used: int = 0
    max_hints: int = 0
    start_time: float = 0.0
    time_limit: int = 0
    is_game_over: bool = False
    is_won: bool = False
    difficulty: Tier = 'easy'
    category: str = 'general'

    @field_validator('letter_mapping')
    @classmethod
    def _read_only_mapping(cls, mapping: Mapping[str, int]) -> Mapping[str, int]:
        # Shared by every state of a round, so it must not be writable
        return MappingProxyType(dict(mapping))

    @field_serializer('letter_mapping')
    def _mapping_as_dict(self, mapping: Mapping[str, int]) -> dict[str, int]:
        return dict(mapping)

    @property
    def letters(self) -> list[str]:
        return sentence_letters(self.original_sentence)

    @property
    def total_letters(self) -> int:
        return len(self.letters)

    @property
    def revealed_positions(self) -> frozenset[int]:
        return self.initial_revealed_positions | self.user_revealed_positions

    @property
    def hidden_positions(self) -> list[int]:
        revealed = self.revealed_positions
        return [pos for pos in range(self.total_letters) if pos not in revealed]

    @property
    def hints_remaining(self) -> int:
        return max(0, self.max_hints - self.hints_used)

    @property
    def mistakes_remaining(self) -> int:
        return max(0, self.max_mistakes - self.mistakes)

    @property
    def status(self) -> str:
        if not self.is_game_over:
            return 'active'
        return 'won' if self.is_won else 'lost'

    def is_complete_with(self, extra_positions=()) -> bool:
        """True if every position is revealed once extra_positions are added."""
        revealed = self.revealed_positions | set(extra_positions)
        return all(pos in revealed for pos in range(self.total_letters))

    def revealed_letter(self, position: int) -> Optional[str]:
        """Letter at a revealed position, None while hidden."""
        if position in self.revealed_positions:
            return self.letters[position]
        return None


class GameResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    sentence_number: int
    difficulty: Tier
    is_won: bool
    mistakes: int
    hints_used: int
    time_spent_seconds: int


class ProgressiveGameState(BaseModel):
    """Session-long progress across rounds."""
    model_config = ConfigDict(frozen=True)

    current_sentence_number: int = 1
    performance_history: tuple[GameResult, ...] = ()
    current_difficulty: Tier = 'easy'


class HintOutcome(BaseModel):
    """Result of choosing a hint. The caller commits it with apply_hint."""
    model_config = ConfigDict(frozen=True)

    success: bool
    reason: Optional[str] = None
    message: str = ''
    revealed_positions: tuple[int, ...] = ()
    strength: Optional[HintStrength] = None
    letter: Optional[str] = None
    is_game_completed: bool = False
