"""Error taxonomy shared by the core, adapters and CLI."""


class VocabSyncError(Exception):
    """Base class for every failure surfaced to the user."""


class ConfigError(VocabSyncError):
    """A required setting is missing. Raised before any network access."""


class MissingTokenError(ConfigError):
    def __init__(self, message: str = "maimemo API token is not set. Add AUTH_TOKEN to your config."):
        super().__init__(message)


class MissingNotebookError(ConfigError):
    def __init__(self, message: str = "Target notepad ID is not set. Add NOTEBOOK_ID to your config."):
        super().__init__(message)


class TransportError(VocabSyncError):
    """Raised by a transport when the request never produced a response."""


class RemoteError(VocabSyncError):
    """A remote call failed."""


class NetworkError(RemoteError):
    """Connectivity failure (DNS, refused connection, timeout)."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Network error: {detail}")


class HttpStatusError(RemoteError):
    """Non-2xx response."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"HTTP status {status}\nResponse: {body or 'no response data'}")


class BusinessError(RemoteError):
    """2xx response whose envelope reports failure."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Service rejected the request: {reason}")


class CollectError(VocabSyncError):
    """A collect run failed at a given stage ("fetch" or "submit")."""

    STAGE_MESSAGES = {
        "fetch": "Failed to fetch the notepad. Check your network connection and notepad ID.",
        "submit": "Failed to update the notepad. Check your network connection and API address.",
        "add": "Failed to add the word to the vocabulary.",
    }

    def __init__(self, stage: str, cause: RemoteError):
        self.stage = stage
        self.cause = cause
        headline = self.STAGE_MESSAGES.get(stage, f"{stage} failed.")
        super().__init__(f"{headline}\n{cause}")
