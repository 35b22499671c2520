"""Vocabulary repository interface."""

from typing import Protocol


class VocabularyRepository(Protocol):
    """Interface for the one-word-per-call vocabulary endpoint."""

    def add(self, vocabulary_id: str, word: str, source: str) -> None:
        """Add a single word to a vocabulary."""
        ...
