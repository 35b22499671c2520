"""maimemo open API adapters - notepad and vocabulary endpoints."""

import json
import logging

from vocabsync.core.envelope import Envelope, decode_notepad_envelope, decode_vocabulary_envelope
from vocabsync.core.errors import (
    BusinessError,
    HttpStatusError,
    NetworkError,
    TransportError,
)
from vocabsync.core.notepad import Notepad
from vocabsync.ports.transport import Transport, TransportResponse

logger = logging.getLogger(__name__)

API_BASE = "https://open.maimemo.com/open/api/v1"
CONTENT_TYPE = "application/json;charset=UTF-8"


def authorization_header(token: str) -> str:
    """Bearer header value. A token that already carries the prefix is kept as-is."""
    return token if token.startswith("Bearer") else f"Bearer {token}"


class _MaimemoClient:
    """Shared request plumbing: headers, transport errors, HTTP status."""

    def __init__(self, transport: Transport, auth_token: str, api_base: str = API_BASE):
        self.transport = transport
        self.auth_token = auth_token
        self.api_base = api_base.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": CONTENT_TYPE,
            "Authorization": authorization_header(self.auth_token),
        }

    def _request(self, method: str, path: str, body: dict | None = None) -> TransportResponse:
        """Send a request. Raises NetworkError or HttpStatusError."""
        url = f"{self.api_base}{path}"
        logger.debug(f"{method} {url}")
        try:
            resp = self.transport.request(method, url, headers=self._headers(), json=body)
        except TransportError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise NetworkError(str(e)) from e

        if not resp.ok:
            logger.warning(f"{method} {url} returned HTTP {resp.status}")
            raise HttpStatusError(resp.status, _body_text(resp.data))
        return resp


class NotepadClient(_MaimemoClient):
    """
    Client for `/notepads/{id}`.

    Implements NotepadRepository protocol. No business logic - just I/O and
    envelope checks.
    """

    def fetch(self, notebook_id: str) -> Notepad:
        """Fetch the current notepad."""
        resp = self._request("GET", f"/notepads/{notebook_id}")
        envelope = _check(decode_notepad_envelope(resp.data))
        if envelope.notepad is None:
            raise BusinessError(envelope.failure_reason())
        return Notepad.from_api(envelope.notepad)

    def submit(self, notebook_id: str, notepad: Notepad) -> None:
        """Overwrite the notepad with `notepad`."""
        resp = self._request("POST", f"/notepads/{notebook_id}", {"notepad": notepad.to_api()})
        _check(decode_notepad_envelope(resp.data))


class VocabularyClient(_MaimemoClient):
    """
    Client for `/vocabularies`.

    Implements VocabularyRepository protocol.
    """

    def add(self, vocabulary_id: str, word: str, source: str) -> None:
        """Add one word to a vocabulary."""
        resp = self._request(
            "POST",
            "/vocabularies",
            {"vocabulary_id": vocabulary_id, "word": word, "source": source},
        )
        _check(decode_vocabulary_envelope(resp.data))


def _check(envelope: Envelope) -> Envelope:
    """Raise BusinessError unless the envelope reports success."""
    if not envelope.ok:
        raise BusinessError(envelope.failure_reason())
    return envelope


def _body_text(data: object) -> str:
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    return json.dumps(data, ensure_ascii=False)
