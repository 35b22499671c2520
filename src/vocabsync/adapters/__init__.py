"""Adapters - I/O implementations of ports."""

from .maimemo_api import API_BASE, NotepadClient, VocabularyClient, authorization_header
from .requests_transport import RequestsTransport

__all__ = [
    "API_BASE",
    "NotepadClient",
    "VocabularyClient",
    "authorization_header",
    "RequestsTransport",
]
