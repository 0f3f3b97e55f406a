"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod
from typing import Iterator

from .models import Category, CorpusEntry, Sentence


class SentenceCorpus(ABC):
    """Read-only source of puzzle sentences."""

    @abstractmethod
    def entries(self) -> Iterator[CorpusEntry]:
        """Iterate over every corpus record in stable order."""
        pass

    @abstractmethod
    def categories(self) -> dict[str, Category]:
        """Category metadata keyed by category key."""
        pass

    def sentences_by_difficulty(self, difficulty: str) -> list[Sentence]:
        return [e.to_sentence() for e in self.entries() if e.difficulty == difficulty]

    def sentences_by_category(self, category: str) -> list[Sentence]:
        return [e.to_sentence() for e in self.entries() if e.category == category]

    def get_sentence_by_id(self, sentence_id: int) -> Sentence | None:
        """Look up a sentence by id. Returns None if not found."""
        for entry in self.entries():
            if entry.id == sentence_id:
                return entry.to_sentence()
        return None


class SettingsSource(ABC):
    """Source of the difficulty table and mechanics."""

    @abstractmethod
    def load_settings(self):
        """Load game settings. Returns a GameSettings."""
        pass
