"""Credential gate - pure validation run before any network call."""

from dataclasses import dataclass

from .errors import MissingNotebookError, MissingTokenError


@dataclass(frozen=True)
class Credentials:
    """Token and target notepad for one operation."""

    auth_token: str
    notebook_id: str


def validate_credentials(auth_token: str | None, notebook_id: str | None) -> Credentials:
    """
    Check that both credentials are present.

    Token is checked first. No format or expiry validation is done.
    Pure function - no I/O.
    """
    if not auth_token:
        raise MissingTokenError()
    if not notebook_id:
        raise MissingNotebookError()
    return Credentials(auth_token=auth_token, notebook_id=notebook_id)
