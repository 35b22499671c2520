"""HTTP transport interface."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class TransportResponse:
    """Status code plus parsed body (JSON value, raw text, or None)."""

    status: int
    data: object = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport(Protocol):
    """Interface for issuing HTTP requests. Raises TransportError on connectivity failure."""

    def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        json: dict | None = None,
    ) -> TransportResponse:
        """Perform one request and return its response."""
        ...
