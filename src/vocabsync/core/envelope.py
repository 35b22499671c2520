"""Response envelopes of the two maimemo API shapes.

The notepad endpoints wrap results in `{success, data, msg}`; the vocabulary
endpoint uses a numeric `code` (0 = success). Each shape has its own decoder.
"""

import json
from dataclasses import dataclass, field


@dataclass
class NotepadEnvelope:
    """`{success, data, msg}` envelope."""

    success: bool
    data: dict = field(default_factory=dict)
    msg: str | None = None
    raw: object = None

    @property
    def ok(self) -> bool:
        return self.success

    @property
    def notepad(self) -> dict | None:
        notepad = self.data.get("notepad")
        return notepad if isinstance(notepad, dict) else None

    def failure_reason(self) -> str:
        return self.msg or _dump(self.raw)


@dataclass
class VocabularyEnvelope:
    """`{code, msg, data}` envelope. `code == 0` means success."""

    code: int | None
    data: dict = field(default_factory=dict)
    msg: str | None = None
    raw: object = None

    @property
    def ok(self) -> bool:
        return self.code == 0

    def failure_reason(self) -> str:
        return self.msg or _dump(self.raw)


Envelope = NotepadEnvelope | VocabularyEnvelope


def decode_notepad_envelope(body: object) -> NotepadEnvelope:
    """Decode a notepad response body. Anything malformed decodes as failure."""
    if not isinstance(body, dict):
        return NotepadEnvelope(success=False, raw=body)
    data = body.get("data")
    return NotepadEnvelope(
        success=body.get("success") is True,
        data=data if isinstance(data, dict) else {},
        msg=body.get("msg"),
        raw=body,
    )


def decode_vocabulary_envelope(body: object) -> VocabularyEnvelope:
    """Decode a vocabulary response body. Anything malformed decodes as failure."""
    if not isinstance(body, dict):
        return VocabularyEnvelope(code=None, raw=body)
    code = body.get("code")
    data = body.get("data")
    return VocabularyEnvelope(
        code=code if isinstance(code, int) and not isinstance(code, bool) else None,
        data=data if isinstance(data, dict) else {},
        msg=body.get("msg") or body.get("message"),
        raw=body,
    )


def _dump(body: object) -> str:
    if body is None:
        return "no response data"
    if isinstance(body, str):
        return body
    return json.dumps(body, ensure_ascii=False)
