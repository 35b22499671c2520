"""Ports - interfaces/protocols for external dependencies."""

from .transport import Transport, TransportResponse
from .notepad_repo import NotepadRepository
from .vocabulary_repo import VocabularyRepository

__all__ = [
    "Transport",
    "TransportResponse",
    "NotepadRepository",
    "VocabularyRepository",
]
