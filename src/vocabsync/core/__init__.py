"""Functional core - pure business logic with no I/O."""

from .credentials import Credentials, validate_credentials
from .envelope import (
    Envelope,
    NotepadEnvelope,
    VocabularyEnvelope,
    decode_notepad_envelope,
    decode_vocabulary_envelope,
)
from .errors import (
    BusinessError,
    CollectError,
    ConfigError,
    HttpStatusError,
    MissingNotebookError,
    MissingTokenError,
    NetworkError,
    RemoteError,
    TransportError,
    VocabSyncError,
)
from .notepad import Notepad, heading_for, insert_word, section_words

__all__ = [
    # Credentials
    "Credentials",
    "validate_credentials",
    # Envelopes
    "Envelope",
    "NotepadEnvelope",
    "VocabularyEnvelope",
    "decode_notepad_envelope",
    "decode_vocabulary_envelope",
    # Notepad
    "Notepad",
    "heading_for",
    "insert_word",
    "section_words",
    # Errors
    "VocabSyncError",
    "ConfigError",
    "MissingTokenError",
    "MissingNotebookError",
    "TransportError",
    "RemoteError",
    "NetworkError",
    "HttpStatusError",
    "BusinessError",
    "CollectError",
]
