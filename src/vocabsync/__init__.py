"""vocabsync - collect words into a maimemo cloud notepad."""

__version__ = "0.1.0"
