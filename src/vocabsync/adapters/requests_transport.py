"""requests-based HTTP transport."""

import logging

import requests

from vocabsync.core.errors import TransportError
from vocabsync.ports.transport import TransportResponse

logger = logging.getLogger(__name__)


class RequestsTransport:
    """
    HTTP transport backed by a requests.Session.

    Implements Transport protocol. Connectivity failures become
    TransportError; HTTP error statuses are returned, not raised.
    """

    def __init__(self, timeout: float = 30, session: requests.Session | None = None):
        self.timeout = timeout
        self._session = session or requests.Session()

    def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        json: dict | None = None,
    ) -> TransportResponse:
        try:
            resp = self._session.request(
                method,
                url,
                headers=headers,
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        return TransportResponse(status=resp.status_code, data=_parse_body(resp))


def _parse_body(resp: requests.Response) -> object:
    """JSON body if there is one, else the raw text, else None."""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text
