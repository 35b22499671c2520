"""Workflow layer between the CLI and the maimemo adapters.

Each function validates settings, runs its remote calls in order, and either
returns True or raises. Nothing is retried and nothing is cached.
"""

import logging
from datetime import date

from .adapters.maimemo_api import NotepadClient, VocabularyClient
from .adapters.requests_transport import RequestsTransport
from .config import Config
from .core.credentials import validate_credentials
from .core.errors import CollectError, MissingNotebookError, RemoteError
from .core.notepad import Notepad, insert_word
from .ports.notepad_repo import NotepadRepository
from .ports.vocabulary_repo import VocabularyRepository

logger = logging.getLogger(__name__)


def get_notepad_client(config: Config) -> NotepadClient:
    """Build the default notepad client from config."""
    return NotepadClient(
        RequestsTransport(timeout=config.timeout),
        config.auth_token,
        api_base=config.api_base,
    )


def get_vocabulary_client(config: Config) -> VocabularyClient:
    """Build the default vocabulary client from config."""
    return VocabularyClient(
        RequestsTransport(timeout=config.timeout),
        config.auth_token,
        api_base=config.api_base,
    )


def collect(
    word: str,
    config: Config,
    client: NotepadRepository | None = None,
    today: date | None = None,
) -> bool:
    """
    Add a word under today's heading in the configured notepad.

    Validate -> fetch -> merge -> submit. The remote notepad is only written
    by the final submit, so any earlier failure leaves it untouched.

    Raises ConfigError before any network call, CollectError afterwards.
    """
    credentials = validate_credentials(config.auth_token, config.notebook_id)
    client = client or get_notepad_client(config)
    today = today or date.today()

    try:
        notepad = client.fetch(credentials.notebook_id)
    except RemoteError as e:
        raise CollectError("fetch", e) from e

    updated = notepad.with_content(insert_word(notepad.content, word, today))

    try:
        client.submit(credentials.notebook_id, updated)
    except RemoteError as e:
        raise CollectError("submit", e) from e

    logger.info(f"Added {word!r} to notepad {credentials.notebook_id}")
    return True


def read_notepad(config: Config, client: NotepadRepository | None = None) -> Notepad:
    """Fetch the configured notepad without modifying it."""
    credentials = validate_credentials(config.auth_token, config.notebook_id)
    client = client or get_notepad_client(config)
    try:
        return client.fetch(credentials.notebook_id)
    except RemoteError as e:
        raise CollectError("fetch", e) from e


def add_vocabulary(
    word: str,
    config: Config,
    client: VocabularyRepository | None = None,
) -> bool:
    """Add a word through the single-call vocabulary endpoint."""
    try:
        credentials = validate_credentials(config.auth_token, config.vocabulary_id)
    except MissingNotebookError:
        raise MissingNotebookError(
            "Target vocabulary ID is not set. Add VOCABULARY_ID to your config."
        ) from None
    client = client or get_vocabulary_client(config)

    try:
        client.add(credentials.notebook_id, word, config.source)
    except RemoteError as e:
        raise CollectError("add", e) from e

    logger.info(f"Added {word!r} to vocabulary {credentials.notebook_id}")
    return True
