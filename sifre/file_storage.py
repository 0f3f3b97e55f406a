"""File-based corpus and settings."""

import json
import os
from typing import Iterator

from .config import SENTENCES_FILE, SETTINGS_FILE
from .interfaces import SentenceCorpus, SettingsSource
from .models import Category, CorpusEntry, GameSettings


def _read_json(path: str) -> dict:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Data file not found at {path}")
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


class FileStorage(SentenceCorpus, SettingsSource):
    """Corpus and settings read from JSON files, loaded once and kept for the process."""

    def __init__(self, sentences_file: str = None, settings_file: str = None):
        self.sentences_file = sentences_file or SENTENCES_FILE
        self.settings_file = settings_file or SETTINGS_FILE
        self._entries = None
        self._categories = None
        self._settings = None

    def _load_corpus(self) -> None:
        data = _read_json(self.sentences_file)
        self._categories = {
            key: Category.model_validate(value)
            for key, value in data.get('categories', {}).items()
        }
        self._entries = [CorpusEntry.model_validate(item) for item in data.get('sentences', [])]

    def entries(self) -> Iterator[CorpusEntry]:
        if self._entries is None:
            self._load_corpus()
        return iter(self._entries)

    def categories(self) -> dict[str, Category]:
        if self._categories is None:
            self._load_corpus()
        return dict(self._categories)

    def load_settings(self) -> GameSettings:
        if self._settings is None:
            self._settings = GameSettings.model_validate(_read_json(self.settings_file))
        return self._settings
