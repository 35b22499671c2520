"""Pure notepad domain logic - no I/O dependencies."""

from dataclasses import dataclass, field, replace
from datetime import date


@dataclass
class Notepad:
    """
    A maimemo cloud notepad.

    Only `content` is interpreted. On submit the fetched record is sent back
    as it came, including null and unknown fields, with just `content`
    replaced. `status`, `title`, `brief` and `tags` are read-only views.
    """

    content: str = ""
    status: str | None = None
    title: str | None = None
    brief: str | None = None
    tags: list[str] | None = None
    raw: dict = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict) -> "Notepad":
        """Create Notepad from a maimemo API response."""
        return cls(
            content=data.get("content") or "",
            status=data.get("status"),
            title=data.get("title"),
            brief=data.get("brief"),
            tags=data.get("tags"),
            raw=dict(data),
        )

    def to_api(self) -> dict:
        """Serialize for the notepad write endpoint."""
        return {**self.raw, "content": self.content}

    def with_content(self, content: str) -> "Notepad":
        return replace(self, content=content)


def heading_for(day: date) -> str:
    """Section heading for a date, e.g. '# 2024-01-01'."""
    return f"# {day.isoformat()}"


def insert_word(content: str, word: str, today: date) -> str:
    """
    Insert a word as the first entry under today's section.

    Every line is trimmed on the way through. If no section for today
    exists, a new one (heading, blank line, word) is prepended to the
    document. Inserting the same word twice yields two lines.

    Pure function - no I/O.
    """
    lines = split_lines(content)
    heading = heading_for(today)

    try:
        idx = lines.index(heading)
    except ValueError:
        return "\n".join([heading, "", word, *lines])

    lines.insert(idx + 1, word)
    return "\n".join(lines)


def split_lines(content: str) -> list[str]:
    """Trimmed lines of a notepad. Empty content has no lines."""
    if not content:
        return []
    return [line.strip() for line in content.split("\n")]


def section_words(content: str, day: date) -> list[str]:
    """Non-blank entries under a date's heading, in document order."""
    lines = split_lines(content)
    heading = heading_for(day)
    if heading not in lines:
        return []

    words = []
    for line in lines[lines.index(heading) + 1 :]:
        if line.startswith("# "):
            break
        if line:
            words.append(line)
    return words
