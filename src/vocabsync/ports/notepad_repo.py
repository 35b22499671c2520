"""Notepad repository interface."""

from typing import Protocol

from vocabsync.core.notepad import Notepad


class NotepadRepository(Protocol):
    """Interface for reading and writing a remote notepad."""

    def fetch(self, notebook_id: str) -> Notepad:
        """Fetch the current notepad."""
        ...

    def submit(self, notebook_id: str, notepad: Notepad) -> None:
        """Overwrite the notepad with a new version."""
        ...
